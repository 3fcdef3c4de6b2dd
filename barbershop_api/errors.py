# barbershop_api/errors.py

from enum import Enum
from typing import Any, Dict, List, Optional


class ApiError(Exception):
    """Base for every failure that maps to a fixed status code."""

    status_code = 500
    default_message = "Internal Server Error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidFieldsError(ApiError):
    status_code = 400
    default_message = "Invalid fields"

    def __init__(self, fields: List[Dict[str, str]], message: Optional[str] = None):
        super().__init__(message, details=fields)


class AuthenticationError(ApiError):
    status_code = 401
    default_message = "Invalid token"
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(ApiError):
    """A resource is not reachable from the principal."""


class HiddenAuthorizationError(AuthorizationError):
    # reported exactly like a missing id
    status_code = 404
    default_message = "Not found"


class ExplicitAuthorizationError(AuthorizationError):
    status_code = 403
    default_message = "Forbidden"


class Disclosure(str, Enum):
    """How a check site reports an unreachable resource."""

    HIDDEN = "hidden"
    EXPLICIT = "explicit"

    def error(self, message: str) -> AuthorizationError:
        if self is Disclosure.EXPLICIT:
            return ExplicitAuthorizationError(message)
        return HiddenAuthorizationError(message)


class ConflictError(ApiError):
    status_code = 409
    default_message = "Conflict"


class UnknownReferenceError(ApiError):
    status_code = 404
    default_message = "Referenced resource not found"


class EmptyResultError(ApiError):
    status_code = 404
    default_message = "No records found"


class InternalError(ApiError):
    status_code = 500
