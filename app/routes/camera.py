from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from app.database import get_store
from app.db.store import DataStore
from app.db.crud import camera as camera_crud
from app.db.schemas.camera import Camera, CameraCreate, CameraUpdate
from app.routes.errors import internal_error, not_found

router = APIRouter(
    prefix="/api/cameras",
    tags=["cameras"]
)


@router.get("", response_model=List[Camera])
def list_cameras(
    hub_id: Optional[int] = Query(None, alias="hubId", description="Only cameras of this hub"),
    store: DataStore = Depends(get_store)
):
    """List cameras, optionally for a single hub"""
    try:
        if hub_id is not None:
            return camera_crud.get_cameras_by_hub(store, hub_id)
        return camera_crud.get_cameras(store)
    except Exception:
        raise internal_error("fetch cameras")


@router.post("", response_model=Camera, status_code=status.HTTP_201_CREATED)
def create_camera(camera: CameraCreate, store: DataStore = Depends(get_store)):
    try:
        return camera_crud.create_camera(store, camera)
    except Exception:
        raise internal_error("create camera")


@router.get("/{camera_id}", response_model=Camera)
def get_camera(camera_id: int, store: DataStore = Depends(get_store)):
    try:
        db_camera = camera_crud.get_camera(store, camera_id)
    except Exception:
        raise internal_error("fetch camera")
    if not db_camera:
        raise not_found("Camera")
    return db_camera


@router.patch("/{camera_id}", response_model=Camera)
def update_camera(camera_id: int, camera: CameraUpdate, store: DataStore = Depends(get_store)):
    """Update camera status or settings"""
    try:
        db_camera = camera_crud.update_camera(store, camera_id, camera)
    except Exception:
        raise internal_error("update camera")
    if not db_camera:
        raise not_found("Camera")
    return db_camera


@router.delete("/{camera_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_camera(camera_id: int, store: DataStore = Depends(get_store)):
    try:
        deleted = camera_crud.delete_camera(store, camera_id)
    except Exception:
        raise internal_error("delete camera")
    if not deleted:
        raise not_found("Camera")
