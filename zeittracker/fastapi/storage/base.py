"""
Storage interface shared by the database and in-memory backends.

Backends are interchangeable: anything with these methods can be
handed to the application as its store.
"""

from datetime import date
from typing import List, Protocol, runtime_checkable

from zeittracker.fastapi.schemas.admin import AdminCreate, AdminRead
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate, TimeEntryRead


@runtime_checkable
class EntryStore(Protocol):
    """Persistence of time entries and admin credentials."""

    name: str

    def get_all(self) -> List[TimeEntryRead]:
        """Every entry, unfiltered, in no particular order."""
        ...

    def get_by_name(self, name: str) -> List[TimeEntryRead]:
        """Entries whose name contains ``name``, ignoring case."""
        ...

    def get_by_date(self, day: date) -> List[TimeEntryRead]:
        """Entries whose timestamp falls on ``day``, boundaries inclusive."""
        ...

    def get_by_name_and_date(self, name: str, day: date) -> List[TimeEntryRead]:
        """Entries matching both the name and the day filter."""
        ...

    def get_recent_by_name(self, name: str, limit: int = 5) -> List[TimeEntryRead]:
        """Newest entries of the employee called ``name``, ignoring case."""
        ...

    def create(self, entry: TimeEntryCreate) -> TimeEntryRead:
        """Persist an entry, filling in id, timestamp and driver flag."""
        ...

    def validate_admin(self, username: str, password: str) -> bool:
        """True iff an admin with exactly these credentials exists."""
        ...

    def create_admin(self, admin: AdminCreate) -> AdminRead:
        """Persist an admin; raises AdminExistsError for a taken username."""
        ...

    def count_admins(self) -> int:
        ...
