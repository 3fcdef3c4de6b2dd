# tests/test_models.py

from datetime import datetime, timedelta, timezone

from sqlmodel import select

from barbershop_api.models import Appointment, AppointmentStatus, User, utcnow


def as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on the way back
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def test_utcnow_is_timezone_aware():
    assert utcnow().utcoffset() == timedelta(0)


def test_timestamps_are_written_and_read_back(session):
    before = utcnow()
    user = User(name="Rita", email="rita@example.com", password_hash="x")
    session.add(user)
    session.commit()
    session.refresh(user)

    assert before <= as_utc(user.created_at) <= utcnow()
    assert as_utc(user.updated_at) >= as_utc(user.created_at)


def test_aware_appointment_datetime_round_trips(session, seed):
    ids = seed()
    when = datetime(2030, 3, 10, 17, 30, tzinfo=timezone.utc)
    session.add(
        Appointment(
            client_name="Pedro",
            client_contact="11977776666",
            datetime=when,
            employee_id=ids["employee_id"],
            service_id=ids["service_id"],
        )
    )
    session.commit()

    appointment = session.exec(select(Appointment)).one()
    assert as_utc(appointment.datetime) == when
    assert appointment.status == AppointmentStatus.PENDING.value
