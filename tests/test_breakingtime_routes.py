# tests/test_breakingtime_routes.py

import pytest


@pytest.fixture
def schedule_id(staffed_shop):
    return staffed_shop["employee"]["schedule"]["id"]


def test_times_round_trip_as_hours_and_minutes(client, api, schedule_id, owner_headers):
    created = api(
        "/breakingtime",
        {"starting_time": "09:00", "ending_time": "12:30", "schedule_id": schedule_id},
        owner_headers,
    )
    assert (created["starting_time"], created["ending_time"]) == ("09:00", "12:30")

    response = client.get(f"/breakingtime/{created['id']}", headers=owner_headers)
    assert response.json()["message"] == f"Details for Breaking Time with id {created['id']}"
    assert response.json()["data"]["schedule"]["id"] == schedule_id

    schedule = client.get(f"/schedule/{schedule_id}", headers=owner_headers).json()["data"]
    assert [(b["starting_time"], b["ending_time"]) for b in schedule["breaking_times"]] == [("09:00", "12:30")]


def test_partial_update_keeps_the_other_end(client, api, schedule_id, owner_headers):
    created = api(
        "/breakingtime",
        {"starting_time": "09:00", "ending_time": "12:30", "schedule_id": schedule_id},
        owner_headers,
    )

    response = client.patch(f"/breakingtime/{created['id']}", json={"ending_time": "13:15"}, headers=owner_headers)
    assert response.status_code == 200
    assert response.json()["data"]["starting_time"] == "09:00"
    assert response.json()["data"]["ending_time"] == "13:15"


def test_bad_time_format(client, schedule_id, owner_headers):
    response = client.post(
        "/breakingtime",
        json={"starting_time": "9h", "ending_time": "25:00", "schedule_id": schedule_id},
        headers=owner_headers,
    )
    assert response.status_code == 400
    assert {item["field"] for item in response.json()["details"]} == {"starting_time", "ending_time"}


def test_another_owners_schedule_is_forbidden(client, schedule_id, intruder_headers):
    response = client.post(
        "/breakingtime",
        json={"starting_time": "09:00", "ending_time": "10:00", "schedule_id": schedule_id},
        headers=intruder_headers,
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Schedule not found or does not belong to your barbershop"


def test_foreign_breaking_time_is_hidden(client, api, schedule_id, owner_headers, intruder_headers):
    created = api(
        "/breakingtime",
        {"starting_time": "09:00", "ending_time": "10:00", "schedule_id": schedule_id},
        owner_headers,
    )

    response = client.delete(f"/breakingtime/{created['id']}", headers=intruder_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Breaking time not found"
