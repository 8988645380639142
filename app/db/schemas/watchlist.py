import json
from pydantic import BeforeValidator, Field
from datetime import datetime
from typing import Annotated, Optional

from app.constants.enums import Severity
from .common import CamelModel, PartialUpdate, UtcDatetime


def _upper_plate(value):
    if isinstance(value, str):
        return value.strip().upper()
    return value


def _serialize_details(value):
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return value


PlateStr = Annotated[str, BeforeValidator(_upper_plate)]
VehicleDetails = Annotated[str, BeforeValidator(_serialize_details)]


class WatchListEntryBase(CamelModel):
    license_plate: PlateStr = Field(..., min_length=1, description="Plate number, stored uppercased")
    reason: str = Field(..., min_length=1, description="stolen, suspect, bolo, warrant or other")
    description: Optional[str] = None
    severity: Severity = Severity.MEDIUM
    added_by: str = Field(..., min_length=1, description="Who put the plate on the list")
    is_active: bool = True
    vehicle_details: Optional[VehicleDetails] = Field(None, description="Make, model, color etc. as a JSON string")
    case_number: Optional[str] = None
    contact_info: Optional[str] = None
    expires_at: Optional[UtcDatetime] = Field(None, description="Entry stops matching after this time")


class WatchListEntryCreate(WatchListEntryBase):
    pass


class WatchListEntryUpdate(PartialUpdate):
    required_fields = ("license_plate", "reason", "severity", "added_by", "is_active")

    license_plate: Optional[PlateStr] = Field(None, min_length=1)
    reason: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    severity: Optional[Severity] = None
    added_by: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None
    vehicle_details: Optional[VehicleDetails] = None
    case_number: Optional[str] = None
    contact_info: Optional[str] = None
    expires_at: Optional[UtcDatetime] = None


class WatchListEntry(WatchListEntryBase):
    id: int
    created_at: datetime
    updated_at: datetime


class LicensePlateCheck(CamelModel):
    license_plate: Optional[str] = Field(None, description="Plate as read by a camera")


class LicensePlateCheckResult(CamelModel):
    match: Optional[WatchListEntry] = None
