from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import watchlist as watchlist_crud
from app.db.schemas.watchlist import (
    LicensePlateCheck,
    LicensePlateCheckResult,
    WatchListEntry,
    WatchListEntryCreate,
    WatchListEntryUpdate,
)
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/watchlist",
    tags=["watchlist"]
)


@router.get("", response_model=List[WatchListEntry])
def get_watch_list(
    include_inactive: bool = Query(False, alias="includeInactive", description="Also list disabled and expired entries"),
    store: DataStore = Depends(get_store)
):
    """Watch list entries, newest first. Only active, unexpired ones unless includeInactive is set"""
    try:
        if include_inactive:
            return watchlist_crud.get_all_watch_list_entries(store)
        return watchlist_crud.get_watch_list(store)
    except Exception:
        raise internal_error("fetch watch list")


@router.post("", response_model=WatchListEntry, status_code=status.HTTP_201_CREATED)
def create_watch_list_entry(entry: WatchListEntryCreate, store: DataStore = Depends(get_store)):
    """Put a license plate on the watch list"""
    try:
        return watchlist_crud.create_watch_list_entry(store, entry)
    except Exception:
        raise internal_error("create watch list entry")


@router.post("/check", response_model=LicensePlateCheckResult)
def check_license_plate(check: LicensePlateCheck, store: DataStore = Depends(get_store)):
    """Look a plate up against the active watch list"""
    if not check.license_plate:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="License plate is required"
        )
    try:
        match = watchlist_crud.check_license_plate_watch(store, check.license_plate)
    except Exception:
        raise internal_error("check license plate")
    return LicensePlateCheckResult(match=match)


@router.get("/{entry_id}", response_model=WatchListEntry)
def get_watch_list_entry(entry_id: int, store: DataStore = Depends(get_store)):
    """Get any watch list entry, including inactive or expired ones"""
    try:
        db_entry = watchlist_crud.get_watch_list_entry(store, entry_id)
    except Exception:
        raise internal_error("fetch watch list entry")
    if not db_entry:
        raise not_found("Watch list entry")
    return db_entry


@router.put("/{entry_id}", response_model=WatchListEntry)
@router.patch("/{entry_id}", response_model=WatchListEntry)
def update_watch_list_entry(entry_id: int, entry: WatchListEntryUpdate, store: DataStore = Depends(get_store)):
    """Update a watch list entry; only the fields sent are changed"""
    try:
        db_entry = watchlist_crud.update_watch_list_entry(store, entry_id, entry)
    except Exception:
        raise internal_error("update watch list entry")
    if not db_entry:
        raise not_found("Watch list entry")
    return db_entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_watch_list_entry(entry_id: int, store: DataStore = Depends(get_store)):
    """Remove an entry from the watch list"""
    try:
        deleted = watchlist_crud.delete_watch_list_entry(store, entry_id)
    except Exception:
        raise internal_error("delete watch list entry")
    if not deleted:
        raise not_found("Watch list entry")
