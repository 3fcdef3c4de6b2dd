# barbershop_api/routers/breakingtimes_routes.py

import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.deps import get_checker, get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.models import BreakingTime
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import BreakingTimePublic
from barbershop_api.validation import validate

KIND = ResourceKind.BREAKING_TIME
NAME = "Breaking Time"

router = APIRouter(
    prefix="/breakingtime",
    tags=["breakingtime"],
)


@router.post("", status_code=201)
def create_breaking_time(
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    # "HH:MM" strings arrive here already pinned to 1970-01-01
    data = validate(KIND, Operation.CREATE, payload)
    checker.breaking_time_target(current_user["id"], data["schedule_id"])

    breaking_time = resolver.create(BreakingTime(**data))
    return success(
        Operation.CREATE, NAME, breaking_time.id, BreakingTimePublic.model_validate(breaking_time)
    )


@router.get("")
def list_breaking_times(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    breaking_times = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY,
        KIND.value,
        data=[BreakingTimePublic.model_validate(b) for b in breaking_times],
    )


@router.get("/{breaking_time_id}")
def get_breaking_time(
    breaking_time_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    breaking_time = resolver.resolve(current_user["id"], KIND, breaking_time_id)
    return success(
        Operation.READ_ONE, NAME, breaking_time.id, BreakingTimePublic.model_validate(breaking_time)
    )


@router.put("/{breaking_time_id}")
@router.patch("/{breaking_time_id}")
def update_breaking_time(
    breaking_time_id: uuid.UUID,
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    changes = validate(KIND, Operation.UPDATE, payload)

    breaking_time = resolver.resolve(current_user["id"], KIND, breaking_time_id)
    breaking_time = resolver.update(current_user["id"], KIND, breaking_time, changes)
    return success(
        Operation.UPDATE, NAME, breaking_time.id, BreakingTimePublic.model_validate(breaking_time)
    )


@router.delete("/{breaking_time_id}")
def delete_breaking_time(
    breaking_time_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    breaking_time = resolver.resolve(current_user["id"], KIND, breaking_time_id)

    data = BreakingTimePublic.model_validate(breaking_time)
    resolver.delete(current_user["id"], KIND, breaking_time)
    return success(Operation.DELETE, NAME, data.id, data)
