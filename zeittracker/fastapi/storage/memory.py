"""
In-memory store.

Entries and admins live in dicts keyed by id with incrementing counters.
Nothing survives a restart; useful for development and tests.
"""

import logging
import threading
from datetime import date, datetime
from typing import Dict, List

from zeittracker.fastapi.core.errors import AdminExistsError
from zeittracker.fastapi.core.utils import day_bounds, normalize_name
from zeittracker.fastapi.schemas.admin import AdminCreate, AdminInDB, AdminRead
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate, TimeEntryRead

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Store keeping everything in process memory."""

    name = "memory"

    def __init__(self):
        self._entries: Dict[int, TimeEntryRead] = {}
        self._admins: Dict[int, AdminInDB] = {}
        self._next_entry_id = 1
        self._next_admin_id = 1
        self._lock = threading.Lock()

    def _snapshot(self) -> List[TimeEntryRead]:
        with self._lock:
            return [entry.model_copy() for entry in self._entries.values()]

    @staticmethod
    def _matches_name(entry: TimeEntryRead, needle: str) -> bool:
        return needle in entry.name.lower()

    @staticmethod
    def _on_day(entry: TimeEntryRead, day: date) -> bool:
        start, end = day_bounds(day)
        return start <= entry.timestamp <= end

    def get_all(self) -> List[TimeEntryRead]:
        return self._snapshot()

    def get_by_name(self, name: str) -> List[TimeEntryRead]:
        needle = normalize_name(name)
        return [entry for entry in self._snapshot() if self._matches_name(entry, needle)]

    def get_by_date(self, day: date) -> List[TimeEntryRead]:
        return [entry for entry in self._snapshot() if self._on_day(entry, day)]

    def get_by_name_and_date(self, name: str, day: date) -> List[TimeEntryRead]:
        needle = normalize_name(name)
        return [
            entry for entry in self._snapshot()
            if self._matches_name(entry, needle) and self._on_day(entry, day)
        ]

    def get_recent_by_name(self, name: str, limit: int = 5) -> List[TimeEntryRead]:
        wanted = normalize_name(name)
        entries = [entry for entry in self._snapshot() if entry.name.lower() == wanted]
        entries.sort(key=lambda entry: (entry.timestamp, entry.id), reverse=True)
        return entries[:limit]

    def create(self, entry: TimeEntryCreate) -> TimeEntryRead:
        with self._lock:
            stored = TimeEntryRead(
                id=self._next_entry_id,
                name=entry.name,
                type=entry.type,
                timestamp=entry.timestamp or datetime.now(),
                latitude=entry.latitude,
                longitude=entry.longitude,
                is_driver=entry.is_driver
            )
            self._entries[stored.id] = stored
            self._next_entry_id += 1
        logger.info("Stored time entry %s (%s, %s)", stored.id, stored.name, stored.type)
        return stored.model_copy()

    def validate_admin(self, username: str, password: str) -> bool:
        with self._lock:
            return any(
                admin.username == username and admin.password == password
                for admin in self._admins.values()
            )

    def create_admin(self, admin: AdminCreate) -> AdminRead:
        with self._lock:
            if any(existing.username == admin.username for existing in self._admins.values()):
                raise AdminExistsError(f"Admin '{admin.username}' already exists")
            stored = AdminInDB(
                id=self._next_admin_id,
                username=admin.username,
                password=admin.password
            )
            self._admins[stored.id] = stored
            self._next_admin_id += 1
        return AdminRead(id=stored.id, username=stored.username)

    def count_admins(self) -> int:
        with self._lock:
            return len(self._admins)
