"""
Utility functions for names, entry types and day boundaries.

All timestamps are naive datetimes in the server's local time zone.
Day boundaries are therefore server-local midnights.
"""

from datetime import date, datetime, time
from typing import Optional, Tuple

CLOCK_IN = "clock-in"
CLOCK_OUT = "clock-out"

# Stored verbatim; only mapped when an entry is displayed
LEGACY_ENTRY_TYPES = {
    "Kommen": CLOCK_IN,
    "Einstempeln": CLOCK_IN,
    "Gehen": CLOCK_OUT,
    "Ausstempeln": CLOCK_OUT,
}

END_OF_DAY = time(23, 59, 59, 999999)


def normalize_name(name: str) -> str:
    """
    Normalize a name for case-insensitive comparison.

    Examples:
        " Anna " -> "anna"
        "BOB" -> "bob"
    """
    if not name:
        return ""
    return name.strip().lower()


def display_entry_type(entry_type: str) -> str:
    """Map legacy entry types to their canonical value, leave others as is."""
    return LEGACY_ENTRY_TYPES.get(entry_type, entry_type)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """
    Get the inclusive start and end of a calendar day.

    Args:
        day: Calendar day in server-local time

    Returns:
        tuple of (00:00:00.000000, 23:59:59.999999)
    """
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)


def to_server_local(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive server-local time."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
