from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from zeittracker.fastapi.core.config import DevSettings
from zeittracker.fastapi.dependencies.database import build_engine, build_session_factory, init_db
from zeittracker.fastapi.main import create_app
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate
from zeittracker.fastapi.storage import DatabaseStorage, MemoryStorage


def make_entry(name="Anna", type="clock-in", timestamp=None, **kwargs) -> TimeEntryCreate:
    data = {"name": name, "type": type, "latitude": 52.5, "longitude": 13.4}
    if timestamp is not None:
        data["timestamp"] = timestamp
    data.update(kwargs)
    return TimeEntryCreate.model_validate(data)


@pytest.fixture
def sqlite_engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def database_store(sqlite_engine):
    return DatabaseStorage(build_session_factory(sqlite_engine))


@pytest.fixture
def memory_store():
    return MemoryStorage()


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Run the test once against each storage backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def seeded_store(store):
    """Two entries for Anna on 2024-01-01 and one for Bob on 2024-01-02."""
    store.create(make_entry("Anna", "clock-in", datetime(2024, 1, 1, 8, 0)))
    store.create(make_entry("Anna", "clock-out", datetime(2024, 1, 1, 17, 0)))
    store.create(make_entry("Bob", "clock-in", datetime(2024, 1, 2, 9, 0)))
    return store


@pytest.fixture
def settings():
    return DevSettings(
        _env_file=None,
        STORAGE_BACKEND="memory",
        INITIAL_ADMIN_USERNAME="admin",
        INITIAL_ADMIN_PASSWORD="admin123",
        LOG_LEVEL="WARNING"
    )


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
