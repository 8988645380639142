from pydantic import Field
from datetime import datetime
from typing import Optional, Dict, Any

from app.constants.enums import Severity
from .common import CamelModel


class EventBase(CamelModel):
    hub_id: int = Field(..., description="ID of the hub that reported the event")
    camera_id: Optional[int] = Field(None, description="Camera involved, if any")
    type: str = Field(..., min_length=1, description="Event type, e.g. person_detection or system")
    severity: Severity = Field(..., description="low, medium, high or critical")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    acknowledged: bool = False
    metadata: Optional[Dict[str, Any]] = Field(None, description="Detector specific details")
    license_plate: Optional[str] = Field(None, description="Plate read by the camera, if any")
    license_plate_thumbnail: Optional[str] = Field(None, description="Plate crop as a data URL")
    license_plate_confidence: Optional[float] = Field(None, ge=0.0, le=1.0)


class EventCreate(EventBase):
    pass


class Event(EventBase):
    id: int
    timestamp: datetime
