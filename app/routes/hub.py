from fastapi import APIRouter, Depends, status
from typing import List

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import hub as hub_crud
from app.db.schemas.hub import Hub, HubCreate, HubUpdate
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/hubs",
    tags=["hubs"]
)


@router.get("", response_model=List[Hub])
def get_hubs(store: DataStore = Depends(get_store)):
    """Get all hubs"""
    try:
        return hub_crud.get_hubs(store)
    except Exception:
        raise internal_error("fetch hubs")


@router.post("", response_model=Hub, status_code=status.HTTP_201_CREATED)
def create_hub(hub: HubCreate, store: DataStore = Depends(get_store)):
    """Register a new hub"""
    try:
        return hub_crud.create_hub(store, hub)
    except Exception:
        raise internal_error("create hub")


@router.get("/{hub_id}", response_model=Hub)
def get_hub(hub_id: int, store: DataStore = Depends(get_store)):
    """Get a specific hub"""
    try:
        db_hub = hub_crud.get_hub(store, hub_id)
    except Exception:
        raise internal_error("fetch hub")
    if not db_hub:
        raise not_found("Hub")
    return db_hub


@router.patch("/{hub_id}", response_model=Hub)
def update_hub(hub_id: int, hub: HubUpdate, store: DataStore = Depends(get_store)):
    """Update a hub"""
    try:
        db_hub = hub_crud.update_hub(store, hub_id, hub)
    except Exception:
        raise internal_error("update hub")
    if not db_hub:
        raise not_found("Hub")
    return db_hub


@router.delete("/{hub_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hub(hub_id: int, store: DataStore = Depends(get_store)):
    """Delete a hub"""
    try:
        deleted = hub_crud.delete_hub(store, hub_id)
    except Exception:
        raise internal_error("delete hub")
    if not deleted:
        raise not_found("Hub")


@router.post("/{hub_id}/arm", response_model=Hub)
def arm_hub(hub_id: int, store: DataStore = Depends(get_store)):
    """Arm the hub's alarm system and refresh its heartbeat"""
    try:
        db_hub = hub_crud.arm_hub(store, hub_id)
    except Exception:
        raise internal_error("arm hub")
    if not db_hub:
        raise not_found("Hub")
    return db_hub


@router.post("/{hub_id}/disarm", response_model=Hub)
def disarm_hub(hub_id: int, store: DataStore = Depends(get_store)):
    """Disarm the hub's alarm system and refresh its heartbeat"""
    try:
        db_hub = hub_crud.disarm_hub(store, hub_id)
    except Exception:
        raise internal_error("disarm hub")
    if not db_hub:
        raise not_found("Hub")
    return db_hub
