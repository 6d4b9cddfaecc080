"""
Admin model for the dashboard login.

Passwords are stored and compared as plaintext.
"""

from sqlalchemy import Column, Integer, String

from zeittracker.fastapi.dependencies.database import Base


class Admin(Base):
    """Admin account allowed to view all time entries."""

    __tablename__ = "admins"

    # Primary key
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier for the admin"
    )

    # Authentication fields
    username = Column(
        String,
        unique=True,
        nullable=False,
        index=True,
        comment="Unique username for admin login"
    )

    password = Column(
        String,
        nullable=False,
        comment="Plaintext password"
    )

    def __repr__(self) -> str:
        """String representation of the Admin model."""
        return f"<Admin(id={self.id}, username='{self.username}')>"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Admin: {self.username}"
