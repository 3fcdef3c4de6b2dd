# tests/test_appointment_routes.py

import pytest


@pytest.fixture
def booking(staffed_shop):
    return {
        "client_name": "Pedro Alves",
        "client_contact": "11977776666",
        "datetime": "2030-03-10T14:30:00-03:00",
        "employee_id": staffed_shop["employee"]["id"],
        "service_id": staffed_shop["service"]["id"],
    }


def test_booking_flow(client, staffed_shop, booking, owner_headers, intruder_headers):
    created = client.post("/appointment", json=booking, headers=owner_headers)
    assert created.status_code == 201
    appointment = created.json()["data"]
    assert appointment["status"] == "PENDENTE"
    assert appointment["datetime"] == "2030-03-10T17:30:00"
    assert appointment["employee"]["id"] == staffed_shop["employee"]["id"]
    assert appointment["service"]["id"] == staffed_shop["service"]["id"]
    assert created.json()["message"] == f"Pedro Alves with id {appointment['id']} created successfully"

    # nothing of it is visible to another owner
    shop_id = staffed_shop["shop"]["id"]
    assert client.get(f"/barbershop/{shop_id}", headers=intruder_headers).status_code == 404
    assert client.get(f"/appointment/{appointment['id']}", headers=intruder_headers).status_code == 404

    updated = client.patch(f"/appointment/{appointment['id']}", json={"status": "COMPLETO"}, headers=owner_headers)
    assert updated.status_code == 200
    after = updated.json()["data"]
    assert after["status"] == "COMPLETO"
    for key in ("client_name", "client_contact", "datetime", "employee_id", "service_id", "created_at"):
        assert after[key] == appointment[key]


def test_service_from_another_barbershop_of_the_same_owner(client, api, staffed_shop, booking, owner_headers, payloads):
    branch = api("/barbershop", payloads["barbershop"](name="Filial Norte"), owner_headers)
    branch_service = api("/service", payloads["service"](branch["id"]), owner_headers)

    response = client.post(
        "/appointment", json={**booking, "service_id": branch_service["id"]}, headers=owner_headers
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Service not found or does not belong to the same barbershop"


def test_foreign_employee_is_forbidden(client, api, staffed_shop, booking, intruder_headers, payloads):
    own_shop = api("/barbershop", payloads["barbershop"](name="Outra Barbearia"), intruder_headers)
    own_service = api("/service", payloads["service"](own_shop["id"]), intruder_headers)

    response = client.post(
        "/appointment", json={**booking, "service_id": own_service["id"]}, headers=intruder_headers
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Employee not found or does not belong to your barbershop"


def test_references_cannot_be_moved(client, api, staffed_shop, booking, owner_headers, payloads):
    appointment = api("/appointment", booking, owner_headers)
    other_service = api(
        "/service", payloads["service"](staffed_shop["shop"]["id"], service_name="Barba"), owner_headers
    )

    response = client.put(
        f"/appointment/{appointment['id']}",
        json={"service_id": other_service["id"], "client_name": "Pedro Souza"},
        headers=owner_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["service_id"] == staffed_shop["service"]["id"]
    assert response.json()["data"]["client_name"] == "Pedro Souza"


@pytest.mark.parametrize(
    "change",
    [
        {"status": "FINALIZADO"},
        {"datetime": "2030-03-10"},
        {"client_contact": "123"},
    ],
)
def test_invalid_updates(client, api, booking, owner_headers, change):
    appointment = api("/appointment", booking, owner_headers)

    response = client.patch(f"/appointment/{appointment['id']}", json=change, headers=owner_headers)
    assert response.status_code == 400
    assert [item["field"] for item in response.json()["details"]] == list(change)


def test_service_with_appointments_cannot_be_deleted(client, api, staffed_shop, booking, owner_headers):
    api("/appointment", booking, owner_headers)
    service_id = staffed_shop["service"]["id"]

    response = client.delete(f"/service/{service_id}", headers=owner_headers)
    assert response.status_code == 409
    assert response.json()["error"] == f"Service with id {service_id} still has 1 appointments"


def test_delete_appointment(client, api, booking, owner_headers):
    appointment = api("/appointment", booking, owner_headers)

    response = client.delete(f"/appointment/{appointment['id']}", headers=owner_headers)
    assert response.status_code == 200
    assert response.json()["message"] == f"Pedro Alves with id {appointment['id']} deleted successfully"
    assert client.get("/appointment", headers=owner_headers).json()["error"] == "No appointments found"
