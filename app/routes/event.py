from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import event as event_crud
from app.db.schemas.event import Event, EventCreate
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/events",
    tags=["events"]
)


@router.get("", response_model=List[Event])
def list_events(
    hub_id: Optional[int] = Query(None, alias="hubId", description="Only events of this hub"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of events to return"),
    store: DataStore = Depends(get_store)
):
    """List events, most recent first.

    With ``hubId`` the hub's events are fetched and then cut to ``limit``;
    with only ``limit`` the recent-events query is used.
    """
    try:
        if hub_id is not None:
            return event_crud.get_events_by_hub(store, hub_id)[:limit]
        if limit is not None:
            return event_crud.get_recent_events(store, limit)
        return event_crud.get_events(store)
    except Exception:
        raise internal_error("fetch events")


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(event: EventCreate, store: DataStore = Depends(get_store)):
    """Record an event reported by a hub"""
    try:
        return event_crud.create_event(store, event)
    except Exception:
        raise internal_error("create event")


@router.get("/{event_id}", response_model=Event)
def get_event(event_id: int, store: DataStore = Depends(get_store)):
    try:
        db_event = event_crud.get_event(store, event_id)
    except Exception:
        raise internal_error("fetch event")
    if not db_event:
        raise not_found("Event")
    return db_event


@router.patch("/{event_id}/acknowledge", response_model=Event)
def acknowledge_event(event_id: int, store: DataStore = Depends(get_store)):
    """Mark an event as acknowledged"""
    try:
        db_event = event_crud.acknowledge_event(store, event_id)
    except Exception:
        raise internal_error("acknowledge event")
    if not db_event:
        raise not_found("Event")
    return db_event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, store: DataStore = Depends(get_store)):
    try:
        deleted = event_crud.delete_event(store, event_id)
    except Exception:
        raise internal_error("delete event")
    if not deleted:
        raise not_found("Event")
