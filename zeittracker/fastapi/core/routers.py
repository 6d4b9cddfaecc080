from fastapi import FastAPI
from zeittracker.fastapi.api.v1.endpoints import admin, general, time_entry

def setup_routers(app: FastAPI):
    # Main routes
    app.include_router(general.router, prefix="", tags=["main"])

    # Time tracking routes
    app.include_router(time_entry.router, prefix="/api/time-entries", tags=["time-tracking"])

    # Admin authentication routes
    app.include_router(admin.router, prefix="/api/admin", tags=["admin-authentication"])
