# tests/conftest.py

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from barbershop_api.auth import create_access_token, hash_password
from barbershop_api.db import build_engine, get_session
from barbershop_api.main import app
from barbershop_api.models import Barbershop, Employee, Schedule, Service, User

# bcrypt is slow, hash once for every fixture user
PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(name="Alice", email=None) -> User:
        user = User(
            name=name,
            email=email or f"{name.lower()}.{uuid.uuid4().hex[:6]}@example.com",
            password_hash=PASSWORD_HASH,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


def bearer(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(make_user):
    return make_user("Owner")


@pytest.fixture
def owner_headers(owner):
    return bearer(owner)


@pytest.fixture
def intruder(make_user):
    return make_user("Intruder")


@pytest.fixture
def intruder_headers(intruder):
    return bearer(intruder)


@pytest.fixture
def api(client):
    """POST a payload and return the envelope's data, failing loudly otherwise."""

    def _create(path: str, payload: dict, headers: dict) -> dict:
        response = client.post(path, json=payload, headers=headers)
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _create


def barbershop_payload(**overrides) -> dict:
    payload = {
        "name": "Navalha de Ouro",
        "address": "Rua das Flores",
        "address_number": "123A",
        "neighbourhood": "Centro",
    }
    payload.update(overrides)
    return payload


def service_payload(barbershop_id, **overrides) -> dict:
    payload = {
        "service_name": "Haircut",
        "price": 45.0,
        "time_taken": 30,
        "barbershop_id": str(barbershop_id),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def payloads():
    return {"barbershop": barbershop_payload, "service": service_payload}


@pytest.fixture
def seed(session, make_user):
    """Rows written straight to the database for resolver-level tests."""

    def _seed(owner: User = None):
        owner = owner or make_user("Owner")
        shop = Barbershop(owner_id=owner.id, **barbershop_payload())
        worker = make_user("Worker")
        employee = Employee(role="BARBEIRO", phone_number="11999990000", user_id=worker.id, barbershop_id=shop.id)
        schedule = Schedule(employee_id=employee.id)
        service = Service(service_name="Haircut", price=45.0, time_taken=30, barbershop_id=shop.id)
        session.add_all([shop, employee, schedule, service])
        session.commit()
        return {
            "owner_id": owner.id,
            "barbershop_id": shop.id,
            "employee_id": employee.id,
            "schedule_id": schedule.id,
            "service_id": service.id,
            "worker_id": worker.id,
        }

    return _seed


@pytest.fixture
def staffed_shop(api, make_user, owner_headers, payloads):
    """A barbershop with one service and one employee, all created through the API."""
    shop = api("/barbershop", payloads["barbershop"](), owner_headers)
    service = api("/service", payloads["service"](shop["id"]), owner_headers)
    worker = make_user("Worker")
    employee = api(
        "/employee",
        {"email": worker.email, "role": "BARBEIRO", "phone_number": "11999990000", "barbershop_id": shop["id"]},
        owner_headers,
    )
    return {"shop": shop, "service": service, "employee": employee, "worker": worker}
