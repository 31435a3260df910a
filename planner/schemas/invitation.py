"""Pydantic schemas for invitations and RSVPs."""
from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, Field, StrictBool

from planner.models.invitation import RSVPStatus
from planner.schemas.contact import ContactSummary
from planner.schemas.event import EventOut, EventSummary
from planner.schemas.common import UTCDatetime


class InvitationOut(BaseModel):
    invitation_id: str
    event_id: str
    contact_id: str
    rsvp_status: RSVPStatus
    responded_at: Optional[UTCDatetime] = None
    response_note: Optional[str] = None
    is_manual_response: bool
    event: EventSummary
    contact: ContactSummary

    model_config = {"from_attributes": True}


class EventCreatedOut(BaseModel):
    event: EventOut
    invitations: list[InvitationOut]
    invitation_count: int


class SendInvitationsRequest(BaseModel):
    contact_ids: list[str] = Field(min_length=1)


class InvitationsSentOut(BaseModel):
    message: str = "Invitations sent"
    invitations: list[InvitationOut]
    count: int


class RSVPRequest(BaseModel):
    contact_id: str = Field(min_length=1)
    # Free-form token, normalized by services.rsvp_status
    rsvp_status: Any
    response_note: Optional[str] = None
    is_manual_response: StrictBool = False


class RSVPOut(BaseModel):
    message: str = "RSVP updated successfully"
    invitation: InvitationOut


class RSVPStatsOut(BaseModel):
    total: int
    attending: int
    maybe: int
    declined: int
    pending: int


class EventRSVPsOut(BaseModel):
    event: EventSummary
    stats: RSVPStatsOut
    invitations: list[InvitationOut]


class ContactInvitationsOut(BaseModel):
    contact: ContactSummary
    invitations: list[InvitationOut]
