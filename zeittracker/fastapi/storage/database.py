"""
SQL-backed store.

Each operation runs in its own session, which is always closed.
SQLAlchemy errors are logged and re-raised as StorageError.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from zeittracker.fastapi.core.errors import AdminExistsError, StorageError
from zeittracker.fastapi.crud.admin import AdminCRUD
from zeittracker.fastapi.crud.time_entry import TimeEntryCRUD
from zeittracker.fastapi.schemas.admin import AdminCreate, AdminRead
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate, TimeEntryRead

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """Store backed by a relational database through SQLAlchemy."""

    name = "database"

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Database operation '%s' failed", operation)
            raise StorageError(f"Database operation '{operation}' failed") from e
        finally:
            db.close()

    def get_all(self) -> List[TimeEntryRead]:
        with self._session("get_all") as db:
            entries = TimeEntryCRUD(db).get_time_entries()
            return [TimeEntryRead.model_validate(entry) for entry in entries]

    def get_by_name(self, name: str) -> List[TimeEntryRead]:
        with self._session("get_by_name") as db:
            entries = TimeEntryCRUD(db).get_time_entries_by_name(name)
            return [TimeEntryRead.model_validate(entry) for entry in entries]

    def get_by_date(self, day: date) -> List[TimeEntryRead]:
        with self._session("get_by_date") as db:
            entries = TimeEntryCRUD(db).get_time_entries_by_date(day)
            return [TimeEntryRead.model_validate(entry) for entry in entries]

    def get_by_name_and_date(self, name: str, day: date) -> List[TimeEntryRead]:
        with self._session("get_by_name_and_date") as db:
            entries = TimeEntryCRUD(db).get_time_entries_by_name_and_date(name, day)
            return [TimeEntryRead.model_validate(entry) for entry in entries]

    def get_recent_by_name(self, name: str, limit: int = 5) -> List[TimeEntryRead]:
        with self._session("get_recent_by_name") as db:
            entries = TimeEntryCRUD(db).get_recent_entries(name, limit)
            return [TimeEntryRead.model_validate(entry) for entry in entries]

    def create(self, entry: TimeEntryCreate) -> TimeEntryRead:
        with self._session("create") as db:
            db_entry = TimeEntryCRUD(db).create_time_entry(entry)
            logger.info("Stored time entry %s (%s, %s)", db_entry.id, db_entry.name, db_entry.type)
            return TimeEntryRead.model_validate(db_entry)

    def validate_admin(self, username: str, password: str) -> bool:
        with self._session("validate_admin") as db:
            return AdminCRUD(db).authenticate(username, password)

    def create_admin(self, admin: AdminCreate) -> AdminRead:
        with self._session("create_admin") as db:
            crud = AdminCRUD(db)
            if crud.get_admin_by_username(admin.username):
                raise AdminExistsError(f"Admin '{admin.username}' already exists")
            try:
                db_admin = crud.create_admin(admin)
            except IntegrityError as e:
                db.rollback()
                raise AdminExistsError(f"Admin '{admin.username}' already exists") from e
            return AdminRead.model_validate(db_admin)

    def count_admins(self) -> int:
        with self._session("count_admins") as db:
            return AdminCRUD(db).count_admins()
