"""Pydantic schemas for Reminders."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from planner.models.reminder import ReminderRecipient, ReminderStatus, ReminderType
from planner.schemas.common import UTCDatetime


class ReminderCreate(BaseModel):
    reminder_time: Optional[datetime] = None
    reminder_type: Optional[ReminderType] = None
    recipient_type: Optional[ReminderRecipient] = None
    custom_message: Optional[str] = None
    auto_create: bool = False


class ReminderUpdate(BaseModel):
    reminder_time: Optional[datetime] = None
    custom_message: Optional[str] = None
    status: Optional[ReminderStatus] = None


class ReminderOut(BaseModel):
    reminder_id: str
    event_id: str
    user_id: str
    reminder_time: UTCDatetime
    reminder_type: ReminderType
    status: ReminderStatus
    recipient_type: ReminderRecipient
    custom_message: Optional[str] = None
    sent_at: Optional[UTCDatetime] = None
    error_message: Optional[str] = None
    created_at: UTCDatetime

    model_config = {"from_attributes": True}


class ReminderCreatedOut(BaseModel):
    message: str
    reminders: list[ReminderOut]
    count: int


class ReminderStatsOut(BaseModel):
    total: int
    pending: int
    sent: int
    failed: int
    cancelled: int


class EventRemindersOut(BaseModel):
    event_id: str
    name: str
    time: UTCDatetime
    reminders: list[ReminderOut]


class UserRemindersOut(BaseModel):
    reminders: list[ReminderOut]
    stats: ReminderStatsOut


class ReminderUpdatedOut(BaseModel):
    message: str
    reminder: ReminderOut
