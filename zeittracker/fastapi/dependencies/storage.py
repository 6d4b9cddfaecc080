from fastapi import Request

from zeittracker.fastapi.storage.base import EntryStore


def get_store(request: Request) -> EntryStore:
    """Return the store the application was started with."""
    return request.app.state.store
