import logging
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.common import utcnow
from app.db.schemas.event import Event, EventCreate

logger = logging.getLogger(__name__)


def _newest_first(events: List[Event]) -> List[Event]:
    return sorted(events, key=lambda event: event.timestamp, reverse=True)


def get_event(store: DataStore, event_id: int) -> Optional[Event]:
    return store.events.get(event_id)


def get_events(store: DataStore) -> List[Event]:
    """All events, most recent first."""
    with store.lock:
        return _newest_first(store.events.values())


def get_events_by_hub(store: DataStore, hub_id: int) -> List[Event]:
    with store.lock:
        return _newest_first(store.events.filter(lambda event: event.hub_id == hub_id))


def get_recent_events(store: DataStore, limit: int = 10) -> List[Event]:
    return get_events(store)[:limit]


def create_event(store: DataStore, event: EventCreate) -> Event:
    with store.lock:
        db_event = Event(id=store.events.next_id(), timestamp=utcnow(), **event.model_dump())
        store.events.put(db_event)
    logger.info("Event %s from hub %s: %s [%s]", db_event.id, db_event.hub_id, db_event.title, db_event.severity.value)
    return db_event


def acknowledge_event(store: DataStore, event_id: int) -> Optional[Event]:
    """Mark an event as acknowledged. Acknowledging twice is a no-op."""
    with store.lock:
        db_event = store.events.get(event_id)
        if db_event is None or db_event.acknowledged:
            return db_event
        db_event = store.events.merge(event_id, {"acknowledged": True})
    logger.info("Event %s acknowledged", event_id)
    return db_event


def delete_event(store: DataStore, event_id: int) -> bool:
    with store.lock:
        return store.events.remove(event_id)
