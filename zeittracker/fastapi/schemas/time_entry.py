"""
Pydantic schemas for TimeEntry validation and serialization.

JSON field names follow the web client: ``isDriver`` and ``displayType``
are camelCase, everything else matches the column names.
"""

from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator

from zeittracker.fastapi.core.utils import display_entry_type, to_server_local


class TimeEntryBase(BaseModel):
    """Base TimeEntry schema with common fields."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Employee name",
        examples=["Anna Schmidt"]
    )

    type: str = Field(
        ...,
        min_length=1,
        description="Type of time entry",
        examples=["clock-in", "clock-out"]
    )

    latitude: float = Field(..., description="Latitude at clock time", examples=[52.52])
    longitude: float = Field(..., description="Longitude at clock time", examples=[13.405])

    is_driver: bool = Field(
        default=False,
        validation_alias=AliasChoices("isDriver", "is_driver"),
        serialization_alias="isDriver",
        description="Whether the employee clocks as a driver"
    )


class TimeEntryCreate(TimeEntryBase):
    """Schema for creating a new time entry."""

    timestamp: Optional[datetime] = Field(
        None,
        description="Time of the entry (defaults to current time if not provided)"
    )

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def require_number(cls, v):
        """Reject strings and booleans that lax float parsing would accept."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a number")
        return v

    @field_validator("is_driver", mode="before")
    @classmethod
    def require_bool(cls, v):
        """Reject "yes", "1", 0 and the like."""
        if not isinstance(v, bool):
            raise ValueError("must be true or false")
        return v

    @field_validator("timestamp")
    @classmethod
    def convert_to_server_time(cls, v):
        return to_server_local(v)


class TimeEntryRead(TimeEntryBase):
    """Schema for reading a stored time entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Time entry unique identifier")
    timestamp: datetime = Field(..., description="When the entry was made")

    @computed_field(alias="displayType")
    @property
    def display_type(self) -> str:
        """Entry type with legacy synonyms mapped to the canonical value."""
        return display_entry_type(self.type)
