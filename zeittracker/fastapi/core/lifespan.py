import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from zeittracker.fastapi.services.time_tracking import ensure_default_admin
from zeittracker.fastapi.storage import build_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    # Build the configured store unless one was injected
    if getattr(app.state, "store", None) is None:
        app.state.store = build_store(settings)

    # Create initial admin if none exists
    ensure_default_admin(
        app.state.store,
        settings.INITIAL_ADMIN_USERNAME,
        settings.INITIAL_ADMIN_PASSWORD
    )

    logger.info("%s %s started with %s storage", settings.APP_NAME, settings.APP_VERSION, app.state.store.name)
    yield
