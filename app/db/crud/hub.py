import logging
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.common import utcnow
from app.db.schemas.hub import Hub, HubCreate, HubUpdate

logger = logging.getLogger(__name__)


def get_hub(store: DataStore, hub_id: int) -> Optional[Hub]:
    return store.hubs.get(hub_id)


def get_hubs(store: DataStore) -> List[Hub]:
    with store.lock:
        return store.hubs.values()


def create_hub(store: DataStore, hub: HubCreate) -> Hub:
    with store.lock:
        db_hub = Hub(id=store.hubs.next_id(), last_heartbeat=utcnow(), **hub.model_dump())
        store.hubs.put(db_hub)
    logger.info("Created hub %s (%s)", db_hub.id, db_hub.serial_number)
    return db_hub


def update_hub(store: DataStore, hub_id: int, hub: HubUpdate) -> Optional[Hub]:
    with store.lock:
        return store.hubs.merge(hub_id, hub.changes())


def delete_hub(store: DataStore, hub_id: int) -> bool:
    with store.lock:
        deleted = store.hubs.remove(hub_id)
    if deleted:
        logger.info("Deleted hub %s", hub_id)
    return deleted


def set_hub_armed(store: DataStore, hub_id: int, armed: bool) -> Optional[Hub]:
    """Arm or disarm a hub and refresh its heartbeat.

    The hub's connectivity status is not checked: an offline hub can be armed.
    """
    with store.lock:
        db_hub = store.hubs.merge(hub_id, {"system_armed": armed, "last_heartbeat": utcnow()})
    if db_hub:
        logger.info("Hub %s %s", hub_id, "armed" if armed else "disarmed")
    return db_hub


def arm_hub(store: DataStore, hub_id: int) -> Optional[Hub]:
    return set_hub_armed(store, hub_id, True)


def disarm_hub(store: DataStore, hub_id: int) -> Optional[Hub]:
    return set_hub_armed(store, hub_id, False)
