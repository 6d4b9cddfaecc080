"""
TimeEntry model for employee clock-in/out records.

Entries are append-only: they are created once and never updated
or deleted.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float, Boolean

from zeittracker.fastapi.dependencies.database import Base


class TimeEntry(Base):
    """
    Time entry model for employee clock-in/out records.

    Attributes:
        id: Unique identifier assigned by the database
        name: Employee name as entered on the clock form
        type: Entry type ("clock-in", "clock-out" or a legacy synonym)
        timestamp: When the clock-in/out occurred (server-local time)
        latitude: Latitude of the device at clock time
        longitude: Longitude of the device at clock time
        is_driver: Whether the employee clocked as a driver
    """

    __tablename__ = "time_entries"

    # Primary key
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        index=True,
        doc="Unique time entry identifier"
    )

    # Entry details
    name = Column(
        String,
        nullable=False,
        index=True,
        doc="Employee name"
    )

    type = Column(
        String,
        nullable=False,
        doc="Type of time entry (clock-in or clock-out)"
    )

    timestamp = Column(
        DateTime,
        nullable=False,
        default=datetime.now,
        index=True,
        doc="When the clock-in/out occurred"
    )

    # Position
    latitude = Column(Float, nullable=False, doc="Latitude at clock time")
    longitude = Column(Float, nullable=False, doc="Longitude at clock time")

    is_driver = Column(
        Boolean,
        nullable=False,
        default=False,
        doc="Whether the employee clocked as a driver"
    )

    def __repr__(self) -> str:
        """String representation of TimeEntry."""
        return f"<TimeEntry(id={self.id}, name='{self.name}', type={self.type}, time={self.timestamp})>"
