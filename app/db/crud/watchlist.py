import logging
import re
from datetime import datetime
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.common import utcnow
from app.db.schemas.watchlist import WatchListEntry, WatchListEntryCreate, WatchListEntryUpdate

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def normalize_plate(license_plate: str) -> str:
    """Uppercase a plate and drop spaces, dashes and any other separator."""
    return _NON_ALNUM.sub("", license_plate.upper())


def is_entry_active(entry: WatchListEntry, now: Optional[datetime] = None) -> bool:
    """An entry matches only while enabled and not past its expiry."""
    if not entry.is_active:
        return False
    if entry.expires_at is None:
        return True
    return entry.expires_at > (now or utcnow())


def get_watch_list_entry(store: DataStore, entry_id: int) -> Optional[WatchListEntry]:
    return store.watch_list.get(entry_id)


def get_watch_list(store: DataStore) -> List[WatchListEntry]:
    """Active entries, most recently added first."""
    now = utcnow()
    with store.lock:
        entries = store.watch_list.filter(lambda entry: is_entry_active(entry, now))
    return sorted(entries, key=lambda entry: entry.created_at, reverse=True)


def get_all_watch_list_entries(store: DataStore) -> List[WatchListEntry]:
    """Every entry, disabled and expired ones included, newest first."""
    with store.lock:
        entries = store.watch_list.values()
    return sorted(entries, key=lambda entry: entry.created_at, reverse=True)


def create_watch_list_entry(store: DataStore, entry: WatchListEntryCreate) -> WatchListEntry:
    now = utcnow()
    with store.lock:
        db_entry = WatchListEntry(
            id=store.watch_list.next_id(),
            created_at=now,
            updated_at=now,
            **entry.model_dump()
        )
        store.watch_list.put(db_entry)
    logger.info("Added %s to watch list (%s, entry %s)", db_entry.license_plate, db_entry.reason, db_entry.id)
    return db_entry


def update_watch_list_entry(store: DataStore, entry_id: int, entry: WatchListEntryUpdate) -> Optional[WatchListEntry]:
    update_data = entry.changes()
    update_data["updated_at"] = utcnow()
    with store.lock:
        return store.watch_list.merge(entry_id, update_data)


def delete_watch_list_entry(store: DataStore, entry_id: int) -> bool:
    with store.lock:
        deleted = store.watch_list.remove(entry_id)
    if deleted:
        logger.info("Removed watch list entry %s", entry_id)
    return deleted


def check_license_plate_watch(store: DataStore, license_plate: str) -> Optional[WatchListEntry]:
    """Return the first active entry whose plate matches, ignoring case and separators.

    Entries are scanned in insertion order. When several active entries share
    a plate the earliest one wins.
    """
    wanted = normalize_plate(license_plate)
    if not wanted:
        return None
    now = utcnow()
    with store.lock:
        for entry in store.watch_list:
            if not is_entry_active(entry, now):
                continue
            if normalize_plate(entry.license_plate) == wanted:
                logger.warning("Watch list hit for %s (entry %s, %s)", license_plate, entry.id, entry.reason)
                return entry
    return None
