# barbershop_api/consistency.py

import logging
import uuid
from typing import Tuple

from sqlmodel import SQLModel, select

from barbershop_api.errors import (
    ConflictError,
    Disclosure,
    ExplicitAuthorizationError,
    UnknownReferenceError,
)
from barbershop_api.graph import ResourceKind, node, plural
from barbershop_api.models import Barbershop, Employee, Schedule, Service, User
from barbershop_api.ownership import OwnershipScopeResolver

logger = logging.getLogger(__name__)


class CrossResourceConsistencyChecker:
    """Checks that span more than one resource, run before anything is written."""

    def __init__(self, resolver: OwnershipScopeResolver):
        self.resolver = resolver
        self.session = resolver.session

    def service_target(self, principal_id: uuid.UUID, barbershop_id: uuid.UUID) -> Barbershop:
        return self.resolver.resolve(
            principal_id,
            ResourceKind.BARBERSHOP,
            barbershop_id,
            Disclosure.EXPLICIT,
            "You can only add services to your own barbershops",
        )

    def employee_target(
        self, principal_id: uuid.UUID, barbershop_id: uuid.UUID, email: str
    ) -> Tuple[Barbershop, User]:
        # 1) the barbershop must be the principal's
        barbershop = self.resolver.resolve(
            principal_id,
            ResourceKind.BARBERSHOP,
            barbershop_id,
            Disclosure.EXPLICIT,
            "You can only add employees to your own barbershops",
        )

        # 2) the email must belong to a registered user
        user = self.session.exec(select(User).where(User.email == email)).first()
        if user is None:
            raise UnknownReferenceError(
                "User not found", details={"email": "User with this email does not exist"}
            )

        # 3) who is not employed anywhere yet
        self.ensure_not_employed(user)
        return barbershop, user

    def ensure_not_employed(self, user: User) -> None:
        existing = self.session.exec(select(Employee).where(Employee.user_id == user.id)).first()
        if existing is not None:
            logger.info("User %s is already employee %s", user.id, existing.id)
            raise ConflictError("User is already an employee")

    def appointment_references(
        self, principal_id: uuid.UUID, employee_id: uuid.UUID, service_id: uuid.UUID
    ) -> Tuple[Employee, Service]:
        # Reported as 403 on purpose, unlike per-id lookups.
        employee = self.resolver.resolve(
            principal_id,
            ResourceKind.EMPLOYEE,
            employee_id,
            Disclosure.EXPLICIT,
            "Employee not found or does not belong to your barbershop",
        )
        service = self.resolver.resolve(
            principal_id,
            ResourceKind.SERVICE,
            service_id,
            Disclosure.EXPLICIT,
            "Service not found or does not belong to your barbershop",
        )

        if service.barbershop_id != employee.barbershop_id:
            logger.warning(
                "Employee %s (barbershop %s) and service %s (barbershop %s) do not match",
                employee.id, employee.barbershop_id, service.id, service.barbershop_id,
            )
            raise ExplicitAuthorizationError(
                "Service not found or does not belong to the same barbershop"
            )
        return employee, service

    def breaking_time_target(self, principal_id: uuid.UUID, schedule_id: uuid.UUID) -> Schedule:
        return self.resolver.resolve(
            principal_id,
            ResourceKind.SCHEDULE,
            schedule_id,
            Disclosure.EXPLICIT,
            "Schedule not found or does not belong to your barbershop",
        )

    def ensure_deletable(self, kind: ResourceKind, resource: SQLModel) -> None:
        for dependent in node(kind).blocking:
            count = self.resolver.count_dependents(kind, resource.id, dependent)
            if count:
                raise ConflictError(
                    f"{node(kind).label} with id {resource.id} still has {count} {plural(dependent)}"
                )
