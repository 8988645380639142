import logging
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.common import utcnow
from app.db.schemas.ai_trigger import AITrigger, AITriggerCreate, AITriggerUpdate

logger = logging.getLogger(__name__)


def get_ai_trigger(store: DataStore, trigger_id: int) -> Optional[AITrigger]:
    return store.ai_triggers.get(trigger_id)


def get_ai_triggers(store: DataStore) -> List[AITrigger]:
    with store.lock:
        return store.ai_triggers.values()


def create_ai_trigger(store: DataStore, trigger: AITriggerCreate) -> AITrigger:
    now = utcnow()
    with store.lock:
        db_trigger = AITrigger(
            id=store.ai_triggers.next_id(),
            created_at=now,
            updated_at=now,
            **trigger.model_dump()
        )
        store.ai_triggers.put(db_trigger)
    logger.info("Created AI trigger %s (%s)", db_trigger.id, db_trigger.name)
    return db_trigger


def update_ai_trigger(store: DataStore, trigger_id: int, trigger: AITriggerUpdate) -> Optional[AITrigger]:
    update_data = trigger.changes()
    update_data["updated_at"] = utcnow()
    with store.lock:
        return store.ai_triggers.merge(trigger_id, update_data)


def delete_ai_trigger(store: DataStore, trigger_id: int) -> bool:
    with store.lock:
        deleted = store.ai_triggers.remove(trigger_id)
    if deleted:
        logger.info("Deleted AI trigger %s", trigger_id)
    return deleted
