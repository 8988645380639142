from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import speaker as speaker_crud
from app.db.schemas.speaker import Speaker, SpeakerCreate, SpeakerUpdate
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/speakers",
    tags=["speakers"]
)


@router.get("", response_model=List[Speaker])
def list_speakers(
    hub_id: Optional[int] = Query(None, alias="hubId"),
    store: DataStore = Depends(get_store)
):
    """List speakers, optionally for a single hub"""
    try:
        if hub_id is not None:
            return speaker_crud.get_speakers_by_hub(store, hub_id)
        return speaker_crud.get_speakers(store)
    except Exception:
        raise internal_error("fetch speakers")


@router.post("", response_model=Speaker, status_code=status.HTTP_201_CREATED)
def create_speaker(speaker: SpeakerCreate, store: DataStore = Depends(get_store)):
    try:
        return speaker_crud.create_speaker(store, speaker)
    except Exception:
        raise internal_error("create speaker")


@router.get("/{speaker_id}", response_model=Speaker)
def get_speaker(speaker_id: int, store: DataStore = Depends(get_store)):
    try:
        db_speaker = speaker_crud.get_speaker(store, speaker_id)
    except Exception:
        raise internal_error("fetch speaker")
    if not db_speaker:
        raise not_found("Speaker")
    return db_speaker


@router.patch("/{speaker_id}", response_model=Speaker)
def update_speaker(speaker_id: int, speaker: SpeakerUpdate, store: DataStore = Depends(get_store)):
    """Change volume, zone or activation of a speaker"""
    try:
        db_speaker = speaker_crud.update_speaker(store, speaker_id, speaker)
    except Exception:
        raise internal_error("update speaker")
    if not db_speaker:
        raise not_found("Speaker")
    return db_speaker


@router.delete("/{speaker_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_speaker(speaker_id: int, store: DataStore = Depends(get_store)):
    try:
        deleted = speaker_crud.delete_speaker(store, speaker_id)
    except Exception:
        raise internal_error("delete speaker")
    if not deleted:
        raise not_found("Speaker")
