# barbershop_api/validation.py

from typing import Any, Dict, List

from pydantic import ValidationError

from barbershop_api import schemas
from barbershop_api.errors import InvalidFieldsError
from barbershop_api.graph import ResourceKind
from barbershop_api.responses import Operation

SCHEMAS = {
    (ResourceKind.BARBERSHOP, Operation.CREATE): schemas.BarbershopCreate,
    (ResourceKind.BARBERSHOP, Operation.UPDATE): schemas.BarbershopUpdate,
    (ResourceKind.EMPLOYEE, Operation.CREATE): schemas.EmployeeCreate,
    (ResourceKind.EMPLOYEE, Operation.UPDATE): schemas.EmployeeUpdate,
    (ResourceKind.SERVICE, Operation.CREATE): schemas.ServiceCreate,
    (ResourceKind.SERVICE, Operation.UPDATE): schemas.ServiceUpdate,
    (ResourceKind.APPOINTMENT, Operation.CREATE): schemas.AppointmentCreate,
    (ResourceKind.APPOINTMENT, Operation.UPDATE): schemas.AppointmentUpdate,
    (ResourceKind.BREAKING_TIME, Operation.CREATE): schemas.BreakingTimeCreate,
    (ResourceKind.BREAKING_TIME, Operation.UPDATE): schemas.BreakingTimeUpdate,
}


def invalid_fields(exc: ValidationError) -> List[Dict[str, str]]:
    """One ``{field, message}`` entry per failing field, in pydantic's order."""
    fields = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "body"
        fields.append({"field": path, "message": error["msg"]})
    return fields


def validate_payload(schema: type, payload: Any, partial: bool = False) -> Dict[str, Any]:
    """Parse ``payload`` with ``schema`` and return the normalized values.

    With ``partial`` only the keys present in the payload are returned, so
    fields the caller left out stay untouched.
    """
    try:
        parsed = schema.model_validate(payload)
    except ValidationError as exc:
        raise InvalidFieldsError(invalid_fields(exc)) from exc

    names = parsed.model_fields_set if partial else type(parsed).model_fields
    return {name: getattr(parsed, name) for name in names}


def validate(kind: ResourceKind, operation: Operation, payload: Any) -> Dict[str, Any]:
    schema = SCHEMAS[(kind, operation)]
    return validate_payload(schema, payload, partial=operation is Operation.UPDATE)
