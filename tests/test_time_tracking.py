from datetime import date, datetime, timedelta, timezone

import pytest

from zeittracker.fastapi.core.errors import EntryValidationError, InvalidRequestError
from zeittracker.fastapi.services.time_tracking import (
    ensure_default_admin, list_entries, login_admin, parse_day, recent_entries, submit_entry
)
from zeittracker.fastapi.storage import MemoryStorage


class RecordingStore(MemoryStorage):
    """Memory store that remembers which lookup was used."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def get_all(self):
        self.calls.append(("get_all",))
        return super().get_all()

    def get_by_name(self, name):
        self.calls.append(("get_by_name", name))
        return super().get_by_name(name)

    def get_by_date(self, day):
        self.calls.append(("get_by_date", day))
        return super().get_by_date(day)

    def get_by_name_and_date(self, name, day):
        self.calls.append(("get_by_name_and_date", name, day))
        return super().get_by_name_and_date(name, day)


class BrokenStore(MemoryStorage):
    def count_admins(self):
        raise RuntimeError("database is down")


@pytest.mark.parametrize("name, day, expected", [
    (None, None, ("get_all",)),
    ("", "", ("get_all",)),
    ("anna", None, ("get_by_name", "anna")),
    (None, "2024-01-01", ("get_by_date", date(2024, 1, 1))),
    ("anna", "2024-01-01", ("get_by_name_and_date", "anna", date(2024, 1, 1))),
    ("anna", date(2024, 1, 1), ("get_by_name_and_date", "anna", date(2024, 1, 1))),
])
def test_list_entries_dispatch(name, day, expected):
    store = RecordingStore()
    list_entries(store, name=name, day=day)
    assert store.calls == [expected]


def test_parse_day():
    assert parse_day("2024-01-01") == date(2024, 1, 1)
    assert parse_day("2024-01-01T15:30:00") == date(2024, 1, 1)
    assert parse_day(datetime(2024, 1, 1, 15, 30)) == date(2024, 1, 1)
    assert parse_day("  ") is None

    with pytest.raises(InvalidRequestError):
        parse_day("yesterday")
    with pytest.raises(InvalidRequestError):
        parse_day("2024-13-45")


def test_submit_entry_from_mapping():
    store = MemoryStorage()
    entry = submit_entry(store, {"name": "  Anna ", "type": "clock-in", "latitude": 52.5, "longitude": 13})

    assert entry.name == "Anna"
    assert entry.longitude == 13.0
    assert entry.is_driver is False
    assert store.get_all() == [entry]


def test_submit_entry_accepts_camel_case_driver_flag():
    entry = submit_entry(MemoryStorage(), {
        "name": "Bob", "type": "clock-out", "latitude": 1.0, "longitude": 2.0, "isDriver": True
    })
    assert entry.is_driver is True


@pytest.mark.parametrize("payload, field", [
    ({"type": "clock-in", "latitude": 1.0, "longitude": 2.0}, "name"),
    ({"name": "   ", "type": "clock-in", "latitude": 1.0, "longitude": 2.0}, "name"),
    ({"name": "Anna", "type": "", "latitude": 1.0, "longitude": 2.0}, "type"),
    ({"name": "Anna", "type": "clock-in", "longitude": 2.0}, "latitude"),
    ({"name": "Anna", "type": "clock-in", "latitude": "north", "longitude": 2.0}, "latitude"),
    ({"name": "Anna", "type": "clock-in", "latitude": 1.0, "longitude": True}, "longitude"),
    ({"name": "Anna", "type": "clock-in", "latitude": 1.0, "longitude": 2.0, "timestamp": "soon"}, "timestamp"),
    ({"name": "Anna", "type": "clock-in", "latitude": 1.0, "longitude": 2.0, "isDriver": "no"}, "isDriver"),
    ({"name": "Anna", "type": "clock-in", "latitude": 1.0, "longitude": 2.0, "isDriver": 1}, "isDriver"),
])
def test_submit_entry_rejects_invalid_payload(payload, field):
    store = MemoryStorage()

    with pytest.raises(EntryValidationError) as exc_info:
        submit_entry(store, payload)

    assert exc_info.value.details.startswith(f"{field}:")
    assert store.get_all() == []


def test_submit_entry_rejects_non_object():
    with pytest.raises(EntryValidationError):
        submit_entry(MemoryStorage(), ["Anna", "clock-in"])


def test_recent_entries_requires_name():
    with pytest.raises(InvalidRequestError):
        recent_entries(MemoryStorage(), "  ")


def test_login_admin():
    store = MemoryStorage()
    ensure_default_admin(store, "admin", "admin123")

    assert login_admin(store, "admin", "admin123") is True
    assert login_admin(store, "admin", "nope") is False

    with pytest.raises(InvalidRequestError):
        login_admin(store, "admin", "")
    with pytest.raises(InvalidRequestError):
        login_admin(store, None, "admin123")


def test_ensure_default_admin_runs_once():
    store = MemoryStorage()

    assert ensure_default_admin(store, "admin", "admin123") is True
    assert ensure_default_admin(store, "admin", "admin123") is False
    assert store.count_admins() == 1


def test_ensure_default_admin_survives_storage_failure(caplog):
    assert ensure_default_admin(BrokenStore(), "admin", "admin123") is False
    assert "Error creating initial admin" in caplog.text


def test_parse_day_uses_server_local_day_for_aware_values():
    evening_in_new_york = datetime(2024, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    local_day = evening_in_new_york.astimezone().date()

    assert parse_day("2024-01-01T23:30:00-05:00") == local_day
    assert parse_day(evening_in_new_york) == local_day
    assert parse_day("2024-01-02T04:30:00Z") == local_day
