import logging
from typing import List, Optional

from app.db.store import DataStore
from app.db.schemas.camera import Camera, CameraCreate, CameraUpdate

logger = logging.getLogger(__name__)


def get_camera(store: DataStore, camera_id: int) -> Optional[Camera]:
    return store.cameras.get(camera_id)


def get_cameras(store: DataStore) -> List[Camera]:
    with store.lock:
        return store.cameras.values()


def get_cameras_by_hub(store: DataStore, hub_id: int) -> List[Camera]:
    with store.lock:
        return store.cameras.filter(lambda camera: camera.hub_id == hub_id)


def create_camera(store: DataStore, camera: CameraCreate) -> Camera:
    with store.lock:
        db_camera = Camera(id=store.cameras.next_id(), **camera.model_dump())
        store.cameras.put(db_camera)
    logger.info("Created camera %s (%s) on hub %s", db_camera.id, db_camera.name, db_camera.hub_id)
    return db_camera


def update_camera(store: DataStore, camera_id: int, camera: CameraUpdate) -> Optional[Camera]:
    with store.lock:
        return store.cameras.merge(camera_id, camera.changes())


def delete_camera(store: DataStore, camera_id: int) -> bool:
    with store.lock:
        deleted = store.cameras.remove(camera_id)
    if deleted:
        logger.info("Deleted camera %s", camera_id)
    return deleted
