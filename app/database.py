from fastapi import Request

from app.db.store import DataStore


def get_store(request: Request) -> DataStore:
    """
    Dependency function that returns the store owned by the running app
    """
    return request.app.state.store
