from pydantic import Field
from typing import Optional

from app.constants.enums import DeviceStatus
from .common import CamelModel, PartialUpdate


class CameraBase(CamelModel):
    hub_id: int = Field(..., description="ID of the owning hub")
    name: str = Field(..., min_length=1)
    location: str
    ip_address: str = Field(..., description="IP address of the camera on the site network")
    status: DeviceStatus = DeviceStatus.OFFLINE
    is_recording: bool = False
    stream_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class CameraCreate(CameraBase):
    pass


class CameraUpdate(PartialUpdate):
    required_fields = ("hub_id", "name", "location", "ip_address", "status", "is_recording")

    hub_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    ip_address: Optional[str] = None
    status: Optional[DeviceStatus] = None
    is_recording: Optional[bool] = None
    stream_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class Camera(CameraBase):
    id: int
