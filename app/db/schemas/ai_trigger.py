from pydantic import Field
from datetime import datetime
from typing import Optional, List

from app.constants.enums import Severity
from .common import CamelModel, PartialUpdate


class AITriggerBase(CamelModel):
    name: str = Field(..., min_length=1, description="Name of the detection rule")
    description: Optional[str] = None
    prompt: str = Field(..., min_length=1, description="What the analysis process should look for")
    severity: Severity
    enabled: bool = True
    confidence: int = Field(70, ge=0, le=100, description="Minimum confidence in percent")
    hub_ids: Optional[List[str]] = Field(None, description="Hubs the rule applies to")
    camera_ids: Optional[List[str]] = Field(None, description="Cameras the rule applies to")
    actions: Optional[List[str]] = Field(None, description="Notification channels, e.g. email or sms")


class AITriggerCreate(AITriggerBase):
    pass


class AITriggerUpdate(PartialUpdate):
    required_fields = ("name", "prompt", "severity", "enabled", "confidence")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    prompt: Optional[str] = Field(None, min_length=1)
    severity: Optional[Severity] = None
    enabled: Optional[bool] = None
    confidence: Optional[int] = Field(None, ge=0, le=100)
    hub_ids: Optional[List[str]] = None
    camera_ids: Optional[List[str]] = None
    actions: Optional[List[str]] = None


class AITrigger(AITriggerBase):
    id: int
    created_at: datetime
    updated_at: datetime
