"""
Time entry endpoints for clock-in/out functionality.

This module provides FastAPI endpoints for submitting clock entries
and for listing them with the name/date filters of the admin dashboard.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from zeittracker.fastapi.dependencies.storage import get_store
from zeittracker.fastapi.schemas.time_entry import TimeEntryCreate, TimeEntryRead
from zeittracker.fastapi.services.time_tracking import (
    DEFAULT_RECENT_LIMIT, list_entries, recent_entries, submit_entry
)
from zeittracker.fastapi.storage.base import EntryStore


router = APIRouter(tags=["time-tracking"])


@router.get("", response_model=List[TimeEntryRead], summary="Get Time Entries")
def get_time_entries(
    name: Optional[str] = Query(None, description="Case-insensitive part of the employee name"),
    date: Optional[str] = Query(None, description="Calendar day (YYYY-MM-DD), server-local time"),
    store: EntryStore = Depends(get_store)
):
    """
    Get time entries, optionally filtered.

    **Parameters:**
    - **name**: Only entries whose name contains this text (optional)
    - **date**: Only entries recorded on this day (optional)

    **Returns:**
    - List of time entries matching all given filters

    **Errors:**
    - **400**: Unparseable date
    - **500**: Storage error
    """
    return list_entries(store, name=name, day=date)


@router.get("/recent", response_model=List[TimeEntryRead], summary="Get Recent Entries")
def get_recent_time_entries(
    name: str = Query(..., description="Employee name, matched ignoring case"),
    limit: int = Query(DEFAULT_RECENT_LIMIT, ge=1, le=100, description="Maximum entries to return"),
    store: EntryStore = Depends(get_store)
):
    """
    Get the latest entries of one employee, newest first.

    **Errors:**
    - **400**: Missing or empty name
    """
    return recent_entries(store, name, limit)


@router.post("", response_model=TimeEntryRead, status_code=status.HTTP_201_CREATED, summary="Clock In/Out")
def create_time_entry(
    entry_data: TimeEntryCreate,
    store: EntryStore = Depends(get_store)
):
    """
    Record a clock-in or clock-out.

    **Parameters:**
    - **name**: Employee name
    - **type**: "clock-in" or "clock-out"
    - **latitude** / **longitude**: Position of the device
    - **isDriver**: Whether the employee clocks as a driver (default false)
    - **timestamp**: When the entry occurred (defaults to now)

    **Returns:**
    - Created time entry record

    **Errors:**
    - **400**: Invalid payload, with the first violated field in `details`
    - **500**: Storage error
    """
    return submit_entry(store, entry_data)
