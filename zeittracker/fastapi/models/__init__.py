from zeittracker.fastapi.models.time_entry import TimeEntry
from zeittracker.fastapi.models.admin import Admin

__all__ = ["TimeEntry", "Admin"]
