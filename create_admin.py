"""
Create an admin account from the command line.

Usage:
    python create_admin.py <username> <password>

Uses the database configured through DATABASE_URL / .env.
"""

import logging
import sys

from zeittracker.fastapi.core.errors import AdminExistsError, StorageError
from zeittracker.fastapi.core.init_settings import global_settings
from zeittracker.fastapi.core.log_config import setup_logging
from zeittracker.fastapi.schemas.admin import AdminCreate
from zeittracker.fastapi.storage import build_store

logger = logging.getLogger("create_admin")


def create_admin(username: str, password: str) -> int:
    """Create the admin and return a process exit code."""
    store = build_store(global_settings)

    try:
        admin = store.create_admin(AdminCreate(username=username, password=password))
    except AdminExistsError:
        logger.error("Admin '%s' already exists", username)
        return 1
    except StorageError as e:
        logger.error("Error creating admin user: %s", e)
        return 1

    logger.info("Created admin '%s' with id %s", admin.username, admin.id)
    return 0


if __name__ == "__main__":
    setup_logging(global_settings.LOG_LEVEL)

    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)

    sys.exit(create_admin(sys.argv[1], sys.argv[2]))
