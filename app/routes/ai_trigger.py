from fastapi import APIRouter, Depends, status
from typing import List

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import ai_trigger as ai_trigger_crud
from app.db.schemas.ai_trigger import AITrigger, AITriggerCreate, AITriggerUpdate
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/ai-triggers",
    tags=["ai-triggers"]
)


@router.get("", response_model=List[AITrigger])
def get_all_ai_triggers(store: DataStore = Depends(get_store)):
    """Get all AI trigger rules"""
    try:
        return ai_trigger_crud.get_ai_triggers(store)
    except Exception:
        raise internal_error("fetch AI triggers")


@router.post("", response_model=AITrigger, status_code=status.HTTP_201_CREATED)
def create_ai_trigger(trigger: AITriggerCreate, store: DataStore = Depends(get_store)):
    """Create a new AI trigger rule"""
    try:
        return ai_trigger_crud.create_ai_trigger(store, trigger)
    except Exception:
        raise internal_error("create AI trigger")


@router.get("/{trigger_id}", response_model=AITrigger)
def get_ai_trigger(trigger_id: int, store: DataStore = Depends(get_store)):
    """Get a specific AI trigger rule"""
    try:
        db_trigger = ai_trigger_crud.get_ai_trigger(store, trigger_id)
    except Exception:
        raise internal_error("fetch AI trigger")
    if not db_trigger:
        raise not_found("AI trigger")
    return db_trigger


@router.patch("/{trigger_id}", response_model=AITrigger)
def update_ai_trigger(trigger_id: int, trigger: AITriggerUpdate, store: DataStore = Depends(get_store)):
    """Update an AI trigger rule"""
    try:
        db_trigger = ai_trigger_crud.update_ai_trigger(store, trigger_id, trigger)
    except Exception:
        raise internal_error("update AI trigger")
    if not db_trigger:
        raise not_found("AI trigger")
    return db_trigger


@router.delete("/{trigger_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ai_trigger(trigger_id: int, store: DataStore = Depends(get_store)):
    """Delete an AI trigger rule"""
    try:
        deleted = ai_trigger_crud.delete_ai_trigger(store, trigger_id)
    except Exception:
        raise internal_error("delete AI trigger")
    if not deleted:
        raise not_found("AI trigger")
