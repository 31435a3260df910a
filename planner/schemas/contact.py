"""Pydantic schemas for Contacts."""
from __future__ import annotations
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field

from planner.schemas.common import UTCDatetime


class ContactCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None
    birth_year: Optional[int] = None


class ContactUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None
    birth_year: Optional[int] = None


class ContactOut(BaseModel):
    contact_id: str
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None
    birth_year: Optional[int] = None
    created_at: UTCDatetime

    model_config = {"from_attributes": True}


class ContactSummary(BaseModel):
    contact_id: str
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class UpcomingBirthdayOut(ContactOut):
    next_birthday: date
    days_until: int
    turning: Optional[int] = None


class BirthdayRange(BaseModel):
    start: date = Field(serialization_alias="from")
    end: date = Field(serialization_alias="to")


class UpcomingBirthdaysOut(BaseModel):
    days_ahead: int
    range: BirthdayRange
    count: int
    contacts: list[UpcomingBirthdayOut]
