# barbershop_api/responses.py

from enum import Enum
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class Operation(str, Enum):
    CREATE = "create"
    READ_ONE = "read_one"
    READ_MANY = "read_many"
    UPDATE = "update"
    DELETE = "delete"


TEMPLATES = {
    Operation.CREATE: ("{name} with id {id} created successfully", 201),
    Operation.READ_ONE: ("Details for {name} with id {id}", 200),
    Operation.READ_MANY: ("Details for all {name}s", 200),
    Operation.UPDATE: ("{name} with id {id} updated successfully", 200),
    Operation.DELETE: ("{name} with id {id} deleted successfully", 200),
}


def format_message(operation: Operation, name: str, resource_id: Any = None) -> str:
    template, _ = TEMPLATES[operation]
    return template.format(name=name, id=resource_id)


def status_for(operation: Operation) -> int:
    return TEMPLATES[operation][1]


def success_body(message: str, data: Any = None, status_code: int = 200) -> dict:
    return {
        "success": True,
        "statusCode": status_code,
        "message": message,
        "data": jsonable_encoder(data),
    }


def error_body(status_code: int, error: str, details: Any = None) -> dict:
    body = {"success": False, "statusCode": status_code, "error": error}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


def success(operation: Operation, name: str, resource_id: Any = None, data: Any = None) -> JSONResponse:
    """Envelope for a finished operation; ``name`` is the object slug for READ_MANY."""
    status_code = status_for(operation)
    return JSONResponse(
        status_code=status_code,
        content=success_body(format_message(operation, name, resource_id), data, status_code),
    )


def message(text: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=success_body(text, data, status_code))


def failure(
    status_code: int,
    error: str,
    details: Any = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, error, details),
        headers=headers,
    )
