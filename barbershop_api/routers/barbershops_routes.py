# barbershop_api/routers/barbershops_routes.py

import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.deps import get_checker, get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.models import Barbershop
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import BarbershopPublic
from barbershop_api.validation import validate

KIND = ResourceKind.BARBERSHOP

router = APIRouter(
    prefix="/barbershop",
    tags=["barbershop"],
)


@router.post("", status_code=201)
def create_barbershop(
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    data = validate(KIND, Operation.CREATE, payload)

    # the principal always owns what it creates
    barbershop = resolver.create(Barbershop(**data, owner_id=current_user["id"]))
    return success(
        Operation.CREATE, barbershop.name, barbershop.id, BarbershopPublic.model_validate(barbershop)
    )


@router.get("")
def list_barbershops(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    barbershops = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY, KIND.value, data=[BarbershopPublic.model_validate(b) for b in barbershops]
    )


@router.get("/{barbershop_id}")
def get_barbershop(
    barbershop_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    barbershop = resolver.resolve(current_user["id"], KIND, barbershop_id)
    return success(
        Operation.READ_ONE, barbershop.name, barbershop.id, BarbershopPublic.model_validate(barbershop)
    )


@router.put("/{barbershop_id}")
@router.patch("/{barbershop_id}")
def update_barbershop(
    barbershop_id: uuid.UUID,
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    changes = validate(KIND, Operation.UPDATE, payload)

    barbershop = resolver.resolve(current_user["id"], KIND, barbershop_id)
    barbershop = resolver.update(current_user["id"], KIND, barbershop, changes)
    return success(
        Operation.UPDATE, barbershop.name, barbershop.id, BarbershopPublic.model_validate(barbershop)
    )


@router.delete("/{barbershop_id}")
def delete_barbershop(
    barbershop_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    barbershop = resolver.resolve(current_user["id"], KIND, barbershop_id)

    # employees and services are not removed with their barbershop
    checker.ensure_deletable(KIND, barbershop)

    data = BarbershopPublic.model_validate(barbershop)
    resolver.delete(current_user["id"], KIND, barbershop)
    return success(Operation.DELETE, data.name, data.id, data)
