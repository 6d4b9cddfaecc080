"""
Submission and query façade between the HTTP layer and the store.

Validates inbound payloads and picks the store lookup that matches the
filters a caller supplied.
"""

import logging
from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from zeittracker.fastapi.core.errors import (
    AdminExistsError,
    EntryValidationError,
    InvalidRequestError,
    describe_validation_errors,
)
from zeittracker.fastapi.core.utils import to_server_local
from zeittracker.fastapi.schemas.admin import AdminCreate
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate, TimeEntryRead
from zeittracker.fastapi.storage.base import EntryStore

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 5


def parse_day(value: Union[date, str, None]) -> Optional[date]:
    """
    Interpret a ``date`` query value as a calendar day.

    Accepts ``YYYY-MM-DD`` or a full ISO datetime, which is reduced to its
    server-local day. Empty values mean no date filter.

    Raises:
        InvalidRequestError: If the value is not a recognizable date
    """
    if value is None or isinstance(value, date):
        # datetime is a date subclass
        return to_server_local(value).date() if isinstance(value, datetime) else value

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return to_server_local(datetime.fromisoformat(text)).date()
    except ValueError:
        raise InvalidRequestError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def list_entries(store: EntryStore, name: Optional[str] = None,
                 day: Union[date, str, None] = None) -> List[TimeEntryRead]:
    """
    Get time entries, filtered by whichever of name and day are given.

    Args:
        store: Store to query
        name: Case-insensitive substring of the employee name (optional)
        day: Calendar day as ``date`` or ISO string (optional)

    Returns:
        List of matching entries

    Raises:
        InvalidRequestError: If ``day`` cannot be parsed
    """
    name = name.strip() if name else None
    target_day = parse_day(day)

    if name and target_day:
        return store.get_by_name_and_date(name, target_day)
    if name:
        return store.get_by_name(name)
    if target_day:
        return store.get_by_date(target_day)
    return store.get_all()


def recent_entries(store: EntryStore, name: str, limit: int = DEFAULT_RECENT_LIMIT) -> List[TimeEntryRead]:
    """Get the newest entries of one employee."""
    if not name or not name.strip():
        raise InvalidRequestError("A name is required")
    return store.get_recent_by_name(name.strip(), limit)


def submit_entry(store: EntryStore, payload: Union[TimeEntryCreate, Mapping[str, Any]]) -> TimeEntryRead:
    """
    Validate and persist a clock-in/out entry.

    Args:
        store: Store to persist into
        payload: Validated schema or raw request body

    Returns:
        Stored entry with generated id and defaults filled in

    Raises:
        EntryValidationError: If the payload is malformed; nothing is stored
    """
    if isinstance(payload, TimeEntryCreate):
        entry = payload
    else:
        if not isinstance(payload, Mapping):
            raise EntryValidationError("Expected a JSON object")
        try:
            entry = TimeEntryCreate.model_validate(dict(payload))
        except ValidationError as e:
            raise EntryValidationError(describe_validation_errors(e.errors())) from e

    return store.create(entry)


def login_admin(store: EntryStore, username: Optional[str], password: Optional[str]) -> bool:
    """
    Check admin credentials.

    No token or session is issued; the caller only learns whether the
    credentials are valid.

    Raises:
        InvalidRequestError: If username or password is missing
    """
    if not username or not password:
        raise InvalidRequestError("Username and password are required")

    valid = store.validate_admin(username, password)
    if not valid:
        logger.warning("Failed admin login for '%s'", username)
    return valid


def ensure_default_admin(store: EntryStore, username: str, password: str) -> bool:
    """
    Create the default admin when no admin exists yet.

    Failures are logged and do not stop the application.

    Returns:
        True if an admin was created
    """
    try:
        admin_count = store.count_admins()
        if admin_count:
            logger.info("Found %d existing admin(s)", admin_count)
            return False

        admin = store.create_admin(AdminCreate(username=username, password=password))
        logger.info("Created initial admin user '%s'; change the password after first login", admin.username)
        return True
    except AdminExistsError:
        logger.info("Initial admin '%s' already exists", username)
        return False
    except Exception:
        logger.exception("Error creating initial admin")
        return False
