"""
TimeEntry CRUD operations.

This module provides database operations for time entries: creation
and the name/date filtered lookups used by the clock and the admin
dashboard. Entries are never updated or deleted.
"""

from typing import List
from datetime import date, datetime
from sqlalchemy import String, and_, desc, func
from sqlalchemy.orm import Session

from zeittracker.fastapi.models.time_entry import TimeEntry
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate
from zeittracker.fastapi.core.utils import day_bounds, normalize_name


def _name_contains(name: str):
    """Case-insensitive substring predicate on the name column."""
    return func.lower(TimeEntry.name, type_=String).contains(normalize_name(name), autoescape=True)


def _on_day(day: date):
    start, end = day_bounds(day)
    return and_(TimeEntry.timestamp >= start, TimeEntry.timestamp <= end)


class TimeEntryCRUD:
    """CRUD operations for TimeEntry model."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def create_time_entry(self, entry_data: TimeEntryCreate) -> TimeEntry:
        """
        Create a new time entry.

        Args:
            entry_data: Validated time entry data

        Returns:
            Created TimeEntry instance with generated id and timestamp
        """
        db_entry = TimeEntry(
            name=entry_data.name,
            type=entry_data.type,
            timestamp=entry_data.timestamp or datetime.now(),
            latitude=entry_data.latitude,
            longitude=entry_data.longitude,
            is_driver=entry_data.is_driver
        )

        self.db.add(db_entry)
        self.db.commit()
        self.db.refresh(db_entry)

        return db_entry

    def get_time_entries(self) -> List[TimeEntry]:
        """Get all time entries."""
        return self.db.query(TimeEntry).all()

    def get_time_entries_by_name(self, name: str) -> List[TimeEntry]:
        """
        Get time entries whose name contains the given text.

        Args:
            name: Text to look for, compared case-insensitively

        Returns:
            List of matching TimeEntry instances
        """
        return self.db.query(TimeEntry).filter(_name_contains(name)).all()

    def get_time_entries_by_date(self, day: date) -> List[TimeEntry]:
        """
        Get time entries recorded on a calendar day.

        Args:
            day: Day in server-local time, both boundaries inclusive

        Returns:
            List of TimeEntry instances for the day
        """
        return self.db.query(TimeEntry).filter(_on_day(day)).all()

    def get_time_entries_by_name_and_date(self, name: str, day: date) -> List[TimeEntry]:
        """Get time entries matching both the name and the day filter."""
        return (self.db.query(TimeEntry)
               .filter(and_(_name_contains(name), _on_day(day)))
               .all())

    def get_recent_entries(self, name: str, limit: int = 5) -> List[TimeEntry]:
        """
        Get the latest entries of one employee.

        Args:
            name: Employee name, matched exactly but case-insensitively
            limit: Maximum number of entries to return

        Returns:
            List of TimeEntry instances, newest first
        """
        return (self.db.query(TimeEntry)
               .filter(func.lower(TimeEntry.name, type_=String) == normalize_name(name))
               .order_by(desc(TimeEntry.timestamp), desc(TimeEntry.id))
               .limit(limit)
               .all())
