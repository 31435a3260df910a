"""Pydantic schemas for Users and login."""
from __future__ import annotations
from pydantic import BaseModel, Field

from planner.schemas.common import UTCDatetime


class UserCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    default_timezone: str = "UTC"


class UserOut(BaseModel):
    user_id: str
    username: str
    first_name: str
    last_name: str
    default_timezone: str
    created_at: UTCDatetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginOut(BaseModel):
    message: str = "Login successful"
    token: str
    user: UserOut
