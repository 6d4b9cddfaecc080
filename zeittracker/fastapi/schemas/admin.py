"""
Admin schemas for request/response validation.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AdminBase(BaseModel):
    """Base admin schema with common fields."""

    username: str = Field(
        ...,
        min_length=1,
        description="Admin username",
        examples=["admin"]
    )


class AdminCreate(AdminBase):
    """Schema for creating a new admin account."""

    password: str = Field(
        ...,
        min_length=1,
        description="Admin password (stored as plaintext)",
        examples=["admin123"]
    )


class AdminRead(AdminBase):
    """Schema for reading admin account information."""

    id: int = Field(..., description="Unique identifier for the admin")

    model_config = ConfigDict(from_attributes=True)


class AdminInDB(AdminRead):
    """Schema for admin data as stored (internal use)."""

    password: str = Field(..., description="Plaintext password")


# Login-related schemas
class AdminLogin(BaseModel):
    """
    Schema for admin login request.

    Both fields are optional here so that a missing credential is
    reported by the login handler rather than as a validation error.
    """

    username: Optional[str] = Field(None, description="Admin username", examples=["admin"])
    password: Optional[str] = Field(None, description="Admin password", examples=["admin123"])


class AdminLoginResponse(BaseModel):
    """Schema for admin login response."""

    success: bool = Field(..., description="Whether the credentials were valid")
    message: str = Field(..., description="Login result message")
