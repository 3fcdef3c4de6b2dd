# barbershop_api/routers/schedules_routes.py

# Schedules are created and removed with their employee; only reads live here.

import uuid

from fastapi import APIRouter, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.deps import get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import SchedulePublic

KIND = ResourceKind.SCHEDULE

router = APIRouter(
    prefix="/schedule",
    tags=["schedule"],
)


@router.get("")
def list_schedules(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    schedules = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY, KIND.value, data=[SchedulePublic.model_validate(s) for s in schedules]
    )


@router.get("/{schedule_id}")
def get_schedule(
    schedule_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    schedule = resolver.resolve(current_user["id"], KIND, schedule_id)
    return success(Operation.READ_ONE, "Schedule", schedule.id, SchedulePublic.model_validate(schedule))
