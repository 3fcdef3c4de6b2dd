# barbershop_api/routers/appointments_routes.py

import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends

from barbershop_api.auth import get_current_user
from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.deps import get_checker, get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.models import Appointment
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import AppointmentPublic
from barbershop_api.validation import validate

KIND = ResourceKind.APPOINTMENT

router = APIRouter(
    prefix="/appointment",
    tags=["appointment"],
)


@router.post("", status_code=201)
def create_appointment(
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    data = validate(KIND, Operation.CREATE, payload)

    # employee and service must both be ours and share a barbershop (403 otherwise)
    checker.appointment_references(current_user["id"], data["employee_id"], data["service_id"])

    # status starts as PENDENTE
    appointment = resolver.create(Appointment(**data))
    return success(
        Operation.CREATE,
        appointment.client_name,
        appointment.id,
        AppointmentPublic.model_validate(appointment),
    )


@router.get("")
def list_appointments(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    appointments = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY,
        KIND.value,
        data=[AppointmentPublic.model_validate(a) for a in appointments],
    )


@router.get("/{appointment_id}")
def get_appointment(
    appointment_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    appointment = resolver.resolve(current_user["id"], KIND, appointment_id)
    return success(
        Operation.READ_ONE,
        appointment.client_name,
        appointment.id,
        AppointmentPublic.model_validate(appointment),
    )


@router.put("/{appointment_id}")
@router.patch("/{appointment_id}")
def update_appointment(
    appointment_id: uuid.UUID,
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    # employee_id / service_id are not accepted here
    changes = validate(KIND, Operation.UPDATE, payload)

    appointment = resolver.resolve(current_user["id"], KIND, appointment_id)
    appointment = resolver.update(current_user["id"], KIND, appointment, changes)
    return success(
        Operation.UPDATE,
        appointment.client_name,
        appointment.id,
        AppointmentPublic.model_validate(appointment),
    )


@router.delete("/{appointment_id}")
def delete_appointment(
    appointment_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    appointment = resolver.resolve(current_user["id"], KIND, appointment_id)

    data = AppointmentPublic.model_validate(appointment)
    resolver.delete(current_user["id"], KIND, appointment)
    return success(Operation.DELETE, data.client_name, data.id, data)
