from datetime import datetime, timezone

from fastapi.testclient import TestClient

from zeittracker.fastapi.core.errors import (
    INVALID_ENTRY_MESSAGE, INVALID_REQUEST_MESSAGE, STORAGE_ERROR_MESSAGE
)
from zeittracker.fastapi.dependencies.database import build_engine, build_session_factory
from zeittracker.fastapi.main import create_app
from zeittracker.fastapi.storage import DatabaseStorage


ANNA = {"name": "Anna", "type": "clock-in", "latitude": 52.5, "longitude": 13.4}


def post_entry(client, **overrides):
    response = client.post("/api/time-entries", json={**ANNA, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client, store):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["storage"] == store.name


def test_create_entry_returns_generated_fields(client):
    before = datetime.now()
    body = post_entry(client)
    after = datetime.now()

    assert isinstance(body["id"], int)
    assert body["isDriver"] is False
    assert body["displayType"] == "clock-in"
    assert before <= datetime.fromisoformat(body["timestamp"]) <= after


def test_create_entry_converts_aware_timestamp_to_server_time(client):
    sent = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
    body = post_entry(client, timestamp=sent.isoformat())

    assert datetime.fromisoformat(body["timestamp"]) == sent.astimezone().replace(tzinfo=None)


def test_create_entry_validation_error(client):
    response = client.post("/api/time-entries", json={"name": "Anna", "type": "clock-in", "longitude": 13.4})

    assert response.status_code == 400
    body = response.json()
    assert body["message"]
    assert body["details"].startswith("latitude:")
    assert client.get("/api/time-entries").json() == []


def test_list_entries_with_filters(client):
    post_entry(client, timestamp="2024-01-01T08:00:00")
    post_entry(client, type="clock-out", timestamp="2024-01-01T17:00:00")
    post_entry(client, name="Bob", timestamp="2024-01-02T09:00:00")

    assert len(client.get("/api/time-entries").json()) == 3
    assert len(client.get("/api/time-entries", params={"name": "ANNA"}).json()) == 2
    assert len(client.get("/api/time-entries", params={"date": "2024-01-02"}).json()) == 1

    both = client.get("/api/time-entries", params={"name": "anna", "date": "2024-01-01"}).json()
    assert sorted(entry["type"] for entry in both) == ["clock-in", "clock-out"]


def test_list_entries_rejects_bad_date(client):
    response = client.get("/api/time-entries", params={"date": "01.01.2024x"})

    assert response.status_code == 400
    assert "Invalid date" in response.json()["message"]


def test_recent_entries(client):
    for hour in range(8, 15):
        post_entry(client, timestamp=f"2024-01-01T{hour:02d}:00:00")

    recent = client.get("/api/time-entries/recent", params={"name": "anna"}).json()

    assert len(recent) == 5
    assert recent[0]["timestamp"] == "2024-01-01T14:00:00"


def test_admin_login_with_default_admin(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_admin_login_wrong_password(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin"})

    assert response.status_code == 401
    assert response.json()["success"] is False
    assert response.json()["message"]


def test_admin_login_requires_both_fields(client):
    response = client.post("/api/admin/login", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json()["message"]


def test_storage_error_is_reported_as_generic_failure(settings):
    # Tables are never created, so the bootstrap fails and is only logged
    broken = DatabaseStorage(build_session_factory(build_engine("sqlite://")))
    app = create_app(settings=settings, store=broken)

    with TestClient(app) as client:
        response = client.get("/api/time-entries")

    assert response.status_code == 500
    assert response.json() == {"message": STORAGE_ERROR_MESSAGE}


def test_memory_backend_selected_from_settings(settings):
    app = create_app(settings=settings)

    with TestClient(app) as client:
        assert client.get("/health").json()["storage"] == "memory"
        assert client.post("/api/admin/login", json={"username": "admin", "password": "admin123"}).status_code == 200


def test_validation_message_depends_on_endpoint(client):
    entry = client.post("/api/time-entries", json={"name": "Anna"})
    recent = client.get("/api/time-entries/recent", params={"name": "anna", "limit": 0})
    login = client.post("/api/admin/login", json={"username": 5, "password": "admin123"})

    assert entry.status_code == 400
    assert entry.json()["message"] == INVALID_ENTRY_MESSAGE
    assert recent.status_code == 400
    assert recent.json()["message"] == INVALID_REQUEST_MESSAGE
    assert recent.json()["details"].startswith("limit:")
    assert login.status_code == 400
    assert login.json()["message"] == INVALID_REQUEST_MESSAGE


def test_driver_flag_must_be_boolean(client):
    response = client.post("/api/time-entries", json={**ANNA, "isDriver": "yes"})

    assert response.status_code == 400
    assert response.json()["details"].startswith("isDriver:")
    assert client.get("/api/time-entries").json() == []
