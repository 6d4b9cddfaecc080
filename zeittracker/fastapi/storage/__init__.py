import logging

from zeittracker.fastapi.core.config import Settings
from zeittracker.fastapi.dependencies.database import build_engine, build_session_factory, init_db
from zeittracker.fastapi.storage.base import EntryStore
from zeittracker.fastapi.storage.database import DatabaseStorage
from zeittracker.fastapi.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("database", "memory")


def build_store(settings: Settings) -> EntryStore:
    """
    Create the store selected by ``STORAGE_BACKEND``.

    The database backend creates missing tables before it is returned.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory storage; entries are lost on restart")
        return MemoryStorage()
    if backend == "database":
        engine = build_engine(settings.DB_URL)
        init_db(engine)
        logger.info("Using database storage at %s", engine.url.render_as_string(hide_password=True))
        return DatabaseStorage(build_session_factory(engine))
    raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}', expected one of {STORAGE_BACKENDS}")


__all__ = ["EntryStore", "DatabaseStorage", "MemoryStorage", "build_store"]
