from pydantic import Field
from typing import Optional

from app.constants.enums import DeviceStatus
from .common import CamelModel, PartialUpdate


class SpeakerBase(CamelModel):
    hub_id: int
    name: str = Field(..., min_length=1)
    zone: str
    ip_address: str
    status: DeviceStatus = DeviceStatus.OFFLINE
    volume: int = Field(50, ge=0, le=100, description="Output volume in percent")
    is_active: bool = False


class SpeakerCreate(SpeakerBase):
    pass


class SpeakerUpdate(PartialUpdate):
    required_fields = ("hub_id", "name", "zone", "ip_address", "status", "volume", "is_active")

    hub_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    zone: Optional[str] = None
    ip_address: Optional[str] = None
    status: Optional[DeviceStatus] = None
    volume: Optional[int] = Field(None, ge=0, le=100)
    is_active: Optional[bool] = None


class Speaker(SpeakerBase):
    id: int
