from fastapi import APIRouter, Depends, Request

from zeittracker.fastapi.dependencies.storage import get_store
from zeittracker.fastapi.storage.base import EntryStore

router = APIRouter(tags=["main"])


@router.get("/health", summary="Health Check")
def health(request: Request, store: EntryStore = Depends(get_store)):
    """Report the application version and the active storage backend."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "storage": store.name
    }
