import pytest

from tests.conftest import TRIP_UUID


def test_demo_item_listed_for_mock_trip(client):
    response = client.get("/api/schedule", params={"trip_id": "mock-trip-1"})
    assert response.status_code == 200
    items = response.json()["data"]
    assert [item["id"] for item in items] == ["s1"]
    assert items[0]["title"] == "Mock Event: Welcome Dinner"
    assert items[0]["location"] == "Downtown"


def test_create_then_list_newest_first(client):
    first = client.post("/api/schedule", json={"trip_id": "mock-trip-1", "title": "Museum"})
    second = client.post("/api/schedule", json={"trip_id": "mock-trip-1", "title": "Lunch"})
    assert first.status_code == 201
    assert second.status_code == 201

    titles = [item["title"] for item in client.get("/api/schedule", params={"trip_id": "mock-trip-1"}).json()["data"]]
    assert titles == ["Lunch", "Museum", "Mock Event: Welcome Dinner"]


def test_round_trip_fields_match_payload(client):
    payload = {
        "trip_id": TRIP_UUID,
        "title": "Boat tour",
        "start": "2026-03-02T09:30:00Z",
        "location": "Harbour",
        "notes": "Bring jackets",
    }
    created = client.post("/api/schedule", json=payload).json()["data"]

    listed = client.get("/api/schedule", params={"trip_id": TRIP_UUID}).json()["data"]
    assert listed == [created]
    for key, value in payload.items():
        assert created[key] == value
    assert created["id"]


def test_start_defaults_to_now(client):
    created = client.post("/api/schedule", json={"trip_id": "mock-trip-1", "title": "Check in"}).json()["data"]
    assert created["start"].endswith("Z")
    assert created["location"] is None
    assert created["notes"] is None


def test_invalid_start_rejected(client):
    response = client.post("/api/schedule", json={"trip_id": "mock-trip-1", "title": "x", "start": "tomorrow"})
    assert response.status_code == 400


@pytest.mark.parametrize("payload", [
    {"title": "No trip"},
    {"trip_id": "bogus", "title": "Bad trip"},
    {"trip_id": "mock-trip-1"},
    {"trip_id": "mock-trip-1", "title": ""},
    {"trip_id": 42, "title": "Numeric trip"},
])
def test_create_validation(client, payload):
    response = client.post("/api/schedule", json=payload)
    assert response.status_code == 400
    assert isinstance(response.json()["error"], str)


def test_invalid_trip_id_on_list(client):
    response = client.get("/api/schedule", params={"trip_id": "trip_1"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid trip_id"}


def test_update_and_delete(client):
    created = client.post("/api/schedule", json={"trip_id": "mock-trip-1", "title": "Dinner"}).json()["data"]

    updated = client.put(f"/api/schedule/{created['id']}", json={"location": "Old town", "id": "hijack"}).json()["data"]
    assert updated["id"] == created["id"]
    assert updated["location"] == "Old town"
    assert updated["title"] == "Dinner"

    assert client.delete(f"/api/schedule/{created['id']}").json() == {"data": {"id": created["id"]}}
    ids = [item["id"] for item in client.get("/api/schedule", params={"trip_id": "mock-trip-1"}).json()["data"]]
    assert created["id"] not in ids


def test_update_rejects_blank_title(client):
    response = client.put("/api/schedule/s1", json={"title": " "})
    assert response.status_code == 400


@pytest.mark.parametrize("changes", [{"ai_generated": None}, {"title": None}, {"start": None}])
def test_update_rejects_null_for_required_fields(client, changes):
    before = client.get("/api/schedule", params={"trip_id": "mock-trip-1"}).json()["data"]

    response = client.put("/api/schedule/s1", json=changes)
    assert response.status_code == 400
    assert "error" in response.json()

    after = client.get("/api/schedule", params={"trip_id": "mock-trip-1"}).json()["data"]
    assert after == before


def test_update_can_clear_optional_fields(client):
    response = client.put("/api/schedule/s1", json={"notes": None, "ai_generated": True})
    assert response.status_code == 200
    assert response.json()["data"]["notes"] is None
    assert response.json()["data"]["ai_generated"] is True


def test_delete_unknown_id(client):
    response = client.delete("/api/schedule/does-not-exist")
    assert response.status_code == 200
    assert response.json() == {"data": {"id": "does-not-exist"}}
