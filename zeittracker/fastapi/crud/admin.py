"""
Admin CRUD operations.

Passwords are compared as plaintext, the way they are stored.
"""

from typing import Optional
from sqlalchemy.orm import Session

from zeittracker.fastapi.models.admin import Admin
from zeittracker.fastapi.schemas.admin import AdminCreate


class AdminCRUD:
    """CRUD operations for Admin model."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def create_admin(self, admin_data: AdminCreate) -> Admin:
        """
        Create a new admin user.

        Args:
            admin_data: Admin creation data with username and password

        Returns:
            Created Admin instance

        Raises:
            sqlalchemy.exc.IntegrityError: If the username already exists
        """
        db_admin = Admin(
            username=admin_data.username,
            password=admin_data.password
        )

        self.db.add(db_admin)
        self.db.commit()
        self.db.refresh(db_admin)

        return db_admin

    def get_admin_by_username(self, username: str) -> Optional[Admin]:
        """Get admin by username, or None if not found."""
        return self.db.query(Admin).filter(Admin.username == username).first()

    def authenticate(self, username: str, password: str) -> bool:
        """Check whether an admin with exactly these credentials exists."""
        return (self.db.query(Admin)
               .filter(Admin.username == username, Admin.password == password)
               .first()) is not None

    def count_admins(self) -> int:
        """Count total number of admins."""
        return self.db.query(Admin).count()
