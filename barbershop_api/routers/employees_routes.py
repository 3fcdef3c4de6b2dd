# barbershop_api/routers/employees_routes.py

import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import IntegrityError

from barbershop_api.auth import get_current_user
from barbershop_api.consistency import CrossResourceConsistencyChecker
from barbershop_api.deps import get_checker, get_resolver
from barbershop_api.graph import ResourceKind
from barbershop_api.models import Employee, Schedule
from barbershop_api.ownership import OwnershipScopeResolver
from barbershop_api.responses import Operation, success
from barbershop_api.schemas import EmployeePublic
from barbershop_api.validation import validate

KIND = ResourceKind.EMPLOYEE

router = APIRouter(
    prefix="/employee",
    tags=["employee"],
)


@router.post("", status_code=201)
def create_employee(
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    data = validate(KIND, Operation.CREATE, payload)

    # 1) barbershop owned, user exists, user not employed yet
    barbershop, user = checker.employee_target(current_user["id"], data["barbershop_id"], data["email"])

    # 2) employee and its schedule are written together
    employee = Employee(
        role=data["role"],
        phone_number=data["phone_number"],
        user_id=user.id,
        barbershop_id=barbershop.id,
    )
    schedule = Schedule(employee_id=employee.id)
    try:
        employee = resolver.create(employee, schedule)
    except IntegrityError:
        # 409 only if another request bound the same user after our check
        checker.ensure_not_employed(user)
        raise

    return success(
        Operation.CREATE, employee.user.name, employee.id, EmployeePublic.model_validate(employee)
    )


@router.get("")
def list_employees(
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    employees = resolver.resolve_all(current_user["id"], KIND)
    return success(
        Operation.READ_MANY, KIND.value, data=[EmployeePublic.model_validate(e) for e in employees]
    )


@router.get("/{employee_id}")
def get_employee(
    employee_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    employee = resolver.resolve(current_user["id"], KIND, employee_id)
    return success(
        Operation.READ_ONE, employee.user.name, employee.id, EmployeePublic.model_validate(employee)
    )


@router.put("/{employee_id}")
@router.patch("/{employee_id}")
def update_employee(
    employee_id: uuid.UUID,
    payload: Any = Body(None),
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    current_user: dict = Depends(get_current_user),
):
    changes = validate(KIND, Operation.UPDATE, payload)

    employee = resolver.resolve(current_user["id"], KIND, employee_id)
    employee = resolver.update(current_user["id"], KIND, employee, changes)
    return success(
        Operation.UPDATE, employee.user.name, employee.id, EmployeePublic.model_validate(employee)
    )


@router.delete("/{employee_id}")
def delete_employee(
    employee_id: uuid.UUID,
    resolver: OwnershipScopeResolver = Depends(get_resolver),
    checker: CrossResourceConsistencyChecker = Depends(get_checker),
    current_user: dict = Depends(get_current_user),
):
    employee = resolver.resolve(current_user["id"], KIND, employee_id)
    checker.ensure_deletable(KIND, employee)

    data = EmployeePublic.model_validate(employee)
    name = employee.user.name
    # schedule and breaking times go with the employee
    resolver.delete(current_user["id"], KIND, employee)
    return success(Operation.DELETE, name, data.id, data)
