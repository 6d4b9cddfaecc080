from typing import Optional
from fastapi import FastAPI

from zeittracker.fastapi.core.config import Settings
from zeittracker.fastapi.core.errors import setup_exception_handlers
from zeittracker.fastapi.core.init_settings import global_settings
from zeittracker.fastapi.core.lifespan import lifespan
from zeittracker.fastapi.core.log_config import setup_logging
from zeittracker.fastapi.core.middleware import setup_cors
from zeittracker.fastapi.core.routers import setup_routers
from zeittracker.fastapi.storage.base import EntryStore


def create_app(settings: Optional[Settings] = None, store: Optional[EntryStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the global ones
        store: Store to use instead of the one selected by STORAGE_BACKEND
    """
    settings = settings or global_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store

    setup_cors(app, settings)
    setup_exception_handlers(app)
    setup_routers(app)
    return app


app = create_app()
