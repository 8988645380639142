"""In-memory data store.

Six identifier-keyed collections live here for the lifetime of the process.
Every collection has its own id counter that only moves forward, so an id is
never handed out twice even after the record it named has been deleted.

Route handlers are plain ``def`` functions that FastAPI runs in a threadpool,
so all reads that iterate a collection and all read-modify-write sequences go
through ``DataStore.lock``. Records are replaced, never mutated in place, so a
reader holding a record keeps seeing a consistent snapshot of it.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from app.db.schemas.ai_trigger import AITrigger
from app.db.schemas.camera import Camera
from app.db.schemas.event import Event
from app.db.schemas.hub import Hub
from app.db.schemas.speaker import Speaker
from app.db.schemas.watchlist import WatchListEntry

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Collection(Generic[RecordT]):
    """Records of one entity type keyed by id, in insertion order."""

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: int) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[RecordT]:
        return iter(list(self._records.values()))

    def next_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def values(self) -> List[RecordT]:
        return list(self._records.values())

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [record for record in self._records.values() if predicate(record)]

    def put(self, record: RecordT) -> RecordT:
        """Store a record under its own id.

        Seeded records arrive with fixed ids, so the counter is moved past
        any id it has not issued yet.
        """
        self._records[record.id] = record
        if record.id >= self._next_id:
            self._next_id = record.id + 1
        return record

    def merge(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Shallow-merge ``changes`` over a stored record.

        Keys missing from ``changes`` keep their value, keys mapped to None
        are cleared. Returns None, without storing anything, for unknown ids.
        """
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = current.model_copy(update=changes)
        self._records[record_id] = updated
        return updated

    def remove(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self):
        self._records.clear()
        self._next_id = 1


class DataStore:
    def __init__(self):
        self.lock = threading.RLock()
        self.hubs: Collection[Hub] = Collection("hubs")
        self.cameras: Collection[Camera] = Collection("cameras")
        self.events: Collection[Event] = Collection("events")
        self.speakers: Collection[Speaker] = Collection("speakers")
        self.ai_triggers: Collection[AITrigger] = Collection("ai_triggers")
        self.watch_list: Collection[WatchListEntry] = Collection("watch_list")

    def collections(self) -> List[Collection]:
        return [self.hubs, self.cameras, self.events, self.speakers, self.ai_triggers, self.watch_list]

    def initialize(self, seed: bool = True) -> "DataStore":
        """Reset every collection and optionally load the fixture snapshot."""
        from app.init_db import seed as seed_store

        with self.lock:
            self.clear()
            if seed:
                seed_store(self)
        logger.info("Data store initialized: %s", self.counts())
        return self

    def clear(self):
        with self.lock:
            for collection in self.collections():
                collection.clear()

    def counts(self) -> Dict[str, int]:
        with self.lock:
            return {collection.name: len(collection) for collection in self.collections()}
