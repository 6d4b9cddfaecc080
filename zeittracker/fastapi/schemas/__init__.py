from zeittracker.fastapi.schemas.admin import (
    AdminBase,
    AdminCreate,
    AdminRead,
    AdminInDB,
    AdminLogin,
    AdminLoginResponse
)
from zeittracker.fastapi.schemas.time_entry import (
    TimeEntryBase,
    TimeEntryCreate,
    TimeEntryRead
)
