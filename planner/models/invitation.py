"""EventInvitation ORM model: one contact's RSVP state for one event."""
import uuid
import enum
from sqlalchemy import (
    Column, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint, Enum as SAEnum,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from planner.database import Base


class RSVPStatus(str, enum.Enum):
    pending = "pending"
    attending = "attending"
    maybe = "maybe"
    declined = "declined"


class EventInvitation(Base):
    __tablename__ = "event_invitations"
    __table_args__ = (
        UniqueConstraint("event_id", "contact_id", name="uq_event_invitations_event_contact"),
    )

    invitation_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.contact_id", ondelete="CASCADE"), nullable=False, index=True)
    rsvp_status = Column(SAEnum(RSVPStatus), nullable=False, default=RSVPStatus.pending)
    responded_at = Column(DateTime(timezone=True), nullable=True)
    response_note = Column(Text, nullable=True)
    is_manual_response = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    event = relationship("Event", back_populates="invitations")
    contact = relationship("Contact", back_populates="invitations")
