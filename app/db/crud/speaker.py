import logging
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.speaker import Speaker, SpeakerCreate, SpeakerUpdate

logger = logging.getLogger(__name__)


def get_speaker(store: DataStore, speaker_id: int) -> Optional[Speaker]:
    return store.speakers.get(speaker_id)


def get_speakers(store: DataStore) -> List[Speaker]:
    with store.lock:
        return store.speakers.values()


def get_speakers_by_hub(store: DataStore, hub_id: int) -> List[Speaker]:
    with store.lock:
        return store.speakers.filter(lambda speaker: speaker.hub_id == hub_id)


def create_speaker(store: DataStore, speaker: SpeakerCreate) -> Speaker:
    with store.lock:
        db_speaker = Speaker(id=store.speakers.next_id(), **speaker.model_dump())
        store.speakers.put(db_speaker)
    logger.info("Created speaker %s (%s) on hub %s", db_speaker.id, db_speaker.name, db_speaker.hub_id)
    return db_speaker


def update_speaker(store: DataStore, speaker_id: int, speaker: SpeakerUpdate) -> Optional[Speaker]:
    with store.lock:
        return store.speakers.merge(speaker_id, speaker.changes())


def delete_speaker(store: DataStore, speaker_id: int) -> bool:
    with store.lock:
        deleted = store.speakers.remove(speaker_id)
    if deleted:
        logger.info("Deleted speaker %s", speaker_id)
    return deleted
