"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from planner.schemas.common import UTCDatetime


class EventCreate(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    time: datetime
    contact_ids: list[str] = []


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = Field(default=None, min_length=1)
    time: Optional[datetime] = None


class EventOut(BaseModel):
    event_id: str
    user_id: str
    name: str
    address: str
    time: UTCDatetime
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = {"from_attributes": True}


class EventSummary(BaseModel):
    event_id: str
    name: str
    address: str
    time: UTCDatetime

    model_config = {"from_attributes": True}
