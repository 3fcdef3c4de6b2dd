# barbershop_api/models.py

import uuid
from datetime import datetime as DateTime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy import types
from sqlmodel import SQLModel, Field, Relationship


def utcnow() -> DateTime:
    return DateTime.now(timezone.utc)


def timestamp(**kwargs):
    """A UTC datetime column. SQLite keeps no offset, so values read back naive."""
    return Field(sa_type=types.DateTime(timezone=True), **kwargs)


class EmployeeRole(str, Enum):
    barber = "BARBEIRO"
    attendant = "ATENDENTE"


class AppointmentStatus(str, Enum):
    PENDING = "PENDENTE"
    COMPLETE = "COMPLETO"
    CANCELLED = "CANCELADO"


class Record(SQLModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: DateTime = timestamp(default_factory=utcnow)
    updated_at: DateTime = timestamp(default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow})


class User(Record, table=True):
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str

    barbershops: List["Barbershop"] = Relationship(back_populates="owner")
    employment: Optional["Employee"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"uselist": False}
    )


class Barbershop(Record, table=True):
    name: str
    address: str
    address_number: str
    neighbourhood: str
    landmark: Optional[str] = None
    owner_id: uuid.UUID = Field(foreign_key="user.id", index=True)

    owner: Optional[User] = Relationship(back_populates="barbershops")
    employees: List["Employee"] = Relationship(back_populates="barbershop")
    services: List["Service"] = Relationship(back_populates="barbershop")


class Employee(Record, table=True):
    role: str
    phone_number: str
    # one employment per user, whatever the barbershop
    user_id: uuid.UUID = Field(foreign_key="user.id", unique=True)
    barbershop_id: uuid.UUID = Field(foreign_key="barbershop.id", index=True)

    user: Optional[User] = Relationship(back_populates="employment")
    barbershop: Optional[Barbershop] = Relationship(back_populates="employees")
    schedule: Optional["Schedule"] = Relationship(
        back_populates="employee", sa_relationship_kwargs={"uselist": False}
    )
    appointments: List["Appointment"] = Relationship(back_populates="employee")


class Service(Record, table=True):
    service_name: str
    price: float
    time_taken: int  # minutes
    barbershop_id: uuid.UUID = Field(foreign_key="barbershop.id", index=True)

    barbershop: Optional[Barbershop] = Relationship(back_populates="services")
    appointments: List["Appointment"] = Relationship(back_populates="service")


class Appointment(Record, table=True):
    client_name: str
    client_contact: str
    datetime: DateTime = timestamp()
    status: str = AppointmentStatus.PENDING.value
    employee_id: uuid.UUID = Field(foreign_key="employee.id", index=True)
    service_id: uuid.UUID = Field(foreign_key="service.id", index=True)

    employee: Optional[Employee] = Relationship(back_populates="appointments")
    service: Optional[Service] = Relationship(back_populates="appointments")


class Schedule(Record, table=True):
    employee_id: uuid.UUID = Field(foreign_key="employee.id", unique=True)

    employee: Optional[Employee] = Relationship(back_populates="schedule")
    breaking_times: List["BreakingTime"] = Relationship(back_populates="schedule")


class BreakingTime(Record, table=True):
    # time of day, stored on 1970-01-01
    starting_time: DateTime = timestamp()
    ending_time: DateTime = timestamp()
    schedule_id: uuid.UUID = Field(foreign_key="schedule.id", index=True)

    schedule: Optional[Schedule] = Relationship(back_populates="breaking_times")
