from pydantic import Field
from datetime import datetime
from typing import Optional, Dict, Any

from app.constants.enums import DeviceStatus
from .common import CamelModel, PartialUpdate


class HubBase(CamelModel):
    name: str = Field(..., min_length=1, description="Display name of the hub")
    location: str = Field(..., description="Site or zone the hub controls")
    serial_number: str = Field(..., min_length=1, description="Hardware serial number")
    status: DeviceStatus = Field(DeviceStatus.OFFLINE, description="Connectivity status")
    system_armed: bool = Field(False, description="Whether the alarm system is armed")
    configuration: Optional[Dict[str, Any]] = Field(None, description="Opaque hub configuration")


class HubCreate(HubBase):
    pass


class HubUpdate(PartialUpdate):
    required_fields = ("name", "location", "serial_number", "status", "system_armed")

    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    serial_number: Optional[str] = Field(None, min_length=1)
    status: Optional[DeviceStatus] = None
    system_armed: Optional[bool] = None
    configuration: Optional[Dict[str, Any]] = None


class Hub(HubBase):
    id: int
    last_heartbeat: datetime
