# barbershop_api/schemas.py

import re
import uuid
from datetime import date, datetime as DateTime, time, timezone
from typing import Annotated, Dict, Iterable, List, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    create_model,
    field_serializer,
)

from barbershop_api.models import AppointmentStatus, EmployeeRole

REFERENCE_DATE = date(1970, 1, 1)
TIME_OF_DAY = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")
ISO_DATETIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})$"
)
ADDRESS_NUMBER = r"^\d+[A-Za-z]?$"


def to_reference_datetime(value) -> DateTime:
    if not isinstance(value, str) or not TIME_OF_DAY.fullmatch(value):
        raise ValueError("Time must be in HH:MM format")
    hours, minutes = value.split(":")
    return DateTime.combine(REFERENCE_DATE, time(int(hours), int(minutes)), tzinfo=timezone.utc)


def require_iso_string(value):
    if not isinstance(value, str) or not ISO_DATETIME.fullmatch(value):
        raise ValueError("Invalid datetime format")
    return value


def to_utc_timestamp(value: DateTime) -> DateTime:
    return value.astimezone(timezone.utc)


TimeOfDay = Annotated[DateTime, BeforeValidator(to_reference_datetime)]
IsoDateTime = Annotated[DateTime, BeforeValidator(require_iso_string), AfterValidator(to_utc_timestamp)]


class Payload(BaseModel):
    model_config = ConfigDict(use_enum_values=True)


def derive_update_schema(
    create_schema: type,
    omit: Iterable[str] = (),
    include: Optional[Dict[str, object]] = None,
    name: Optional[str] = None,
) -> type:
    """Build the partial-update model for ``create_schema``.

    Fields named in ``omit`` are dropped. Every other field keeps its type
    and constraints but gets a ``None`` default, so it can be left out; an
    explicit ``null`` is still rejected unless the field was nullable to
    begin with. ``include`` adds fields that only exist on update.
    """
    omitted = set(omit)
    fields = {}
    for field_name, info in create_schema.model_fields.items():
        if field_name in omitted:
            continue
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (annotation, None)
    for field_name, annotation in (include or {}).items():
        fields[field_name] = (annotation, None)

    return create_model(
        name or create_schema.__name__.replace("Create", "Update"),
        __base__=Payload,
        **fields,
    )


# --- auth ---

class SignupCreate(Payload):
    name: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)


class LoginCreate(Payload):
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


# --- create payloads ---

class BarbershopCreate(Payload):
    name: str = Field(min_length=3, max_length=50)
    address: str = Field(min_length=3, max_length=255)
    address_number: str = Field(pattern=ADDRESS_NUMBER)
    neighbourhood: str = Field(min_length=2, max_length=100)
    landmark: Optional[str] = Field(default=None, max_length=100)


class EmployeeCreate(Payload):
    email: EmailStr
    role: EmployeeRole
    phone_number: str
    barbershop_id: uuid.UUID


class ServiceCreate(Payload):
    service_name: str = Field(min_length=3, max_length=100)
    price: float = Field(gt=0, le=9999.99, strict=True)
    time_taken: int = Field(gt=0, le=480, strict=True)  # minutes
    barbershop_id: uuid.UUID


class AppointmentCreate(Payload):
    client_name: str = Field(min_length=2, max_length=100)
    client_contact: str = Field(min_length=10, max_length=20)
    datetime: IsoDateTime
    employee_id: uuid.UUID
    service_id: uuid.UUID


class BreakingTimeCreate(Payload):
    starting_time: TimeOfDay
    ending_time: TimeOfDay
    schedule_id: uuid.UUID


# --- update payloads ---

BarbershopUpdate = derive_update_schema(BarbershopCreate)
EmployeeUpdate = derive_update_schema(EmployeeCreate, omit={"email", "barbershop_id"})
ServiceUpdate = derive_update_schema(ServiceCreate, omit={"barbershop_id"})
AppointmentUpdate = derive_update_schema(
    AppointmentCreate,
    omit={"employee_id", "service_id"},
    include={"status": AppointmentStatus},
)
BreakingTimeUpdate = derive_update_schema(BreakingTimeCreate, omit={"schedule_id"})


# --- public representations ---

class Public(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class UserPublic(Public):
    id: uuid.UUID
    name: str
    email: str


class BarbershopPublic(Public):
    id: uuid.UUID
    name: str
    address: str
    address_number: str
    neighbourhood: str
    landmark: Optional[str] = None
    owner_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime


class ServicePublic(Public):
    id: uuid.UUID
    service_name: str
    price: float
    time_taken: int
    barbershop_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime
    barbershop: Optional[BarbershopPublic] = None


class ScheduleRef(Public):
    id: uuid.UUID
    employee_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime


class EmployeePublic(Public):
    id: uuid.UUID
    role: str
    phone_number: str
    user_id: uuid.UUID
    barbershop_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime
    user: Optional[UserPublic] = None
    barbershop: Optional[BarbershopPublic] = None
    schedule: Optional[ScheduleRef] = None


class AppointmentPublic(Public):
    id: uuid.UUID
    client_name: str
    client_contact: str
    datetime: DateTime
    status: str
    employee_id: uuid.UUID
    service_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime
    employee: Optional[EmployeePublic] = None
    service: Optional[ServicePublic] = None


class BreakingTimeRef(Public):
    id: uuid.UUID
    starting_time: DateTime
    ending_time: DateTime
    schedule_id: uuid.UUID
    created_at: DateTime
    updated_at: DateTime

    @field_serializer("starting_time", "ending_time")
    def serialize_time_of_day(self, value: DateTime) -> str:
        return value.strftime("%H:%M")


class ScheduleDetail(ScheduleRef):
    employee: Optional[EmployeePublic] = None


class SchedulePublic(ScheduleDetail):
    breaking_times: List[BreakingTimeRef] = []


class BreakingTimePublic(BreakingTimeRef):
    schedule: Optional[ScheduleDetail] = None
