# barbershop_api/routers/services_routes.py

import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.deps import get_checker, get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.models import Service
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import ServicePublic
from barbershop_api.validation import validate

KIND = ResourceKind.SERVICE

router = APIRouter(
    prefix="/service",
    tags=["service"],
)


@router.post("", status_code=201)
def create_service(
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    data = validate(KIND, Operation.CREATE, payload)
    checker.service_target(current_user["id"], data["barbershop_id"])

    service = resolver.create(Service(**data))
    return success(
        Operation.CREATE, service.service_name, service.id, ServicePublic.model_validate(service)
    )


@router.get("")
def list_services(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    services = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY, KIND.value, data=[ServicePublic.model_validate(s) for s in services]
    )


@router.get("/{service_id}")
def get_service(
    service_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    service = resolver.resolve(current_user["id"], KIND, service_id)
    return success(
        Operation.READ_ONE, service.service_name, service.id, ServicePublic.model_validate(service)
    )


@router.put("/{service_id}")
@router.patch("/{service_id}")
def update_service(
    service_id: uuid.UUID,
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    changes = validate(KIND, Operation.UPDATE, payload)

    service = resolver.resolve(current_user["id"], KIND, service_id)
    service = resolver.update(current_user["id"], KIND, service, changes)
    return success(
        Operation.UPDATE, service.service_name, service.id, ServicePublic.model_validate(service)
    )


@router.delete("/{service_id}")
def delete_service(
    service_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    service = resolver.resolve(current_user["id"], KIND, service_id)
    checker.ensure_deletable(KIND, service)

    data = ServicePublic.model_validate(service)
    resolver.delete(current_user["id"], KIND, service)
    return success(Operation.DELETE, data.service_name, data.id, data)
