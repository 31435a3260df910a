"""EventReminder ORM model: a stored reminder; nothing here dispatches it."""
import uuid
import enum
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from planner.database import Base


class ReminderType(str, enum.Enum):
    email = "email"
    sms = "sms"
    notification = "notification"


class ReminderStatus(str, enum.Enum):
    pending = "pending"
    sent = "sent"
    failed = "failed"
    cancelled = "cancelled"


class ReminderRecipient(str, enum.Enum):
    all_invitees = "all_invitees"
    attending_only = "attending_only"
    creator_only = "creator_only"


class EventReminder(Base):
    __tablename__ = "event_reminders"

    reminder_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    reminder_time = Column(DateTime(timezone=True), nullable=False)
    reminder_type = Column(SAEnum(ReminderType), nullable=False, default=ReminderType.email)
    status = Column(SAEnum(ReminderStatus), nullable=False, default=ReminderStatus.pending)
    recipient_type = Column(SAEnum(ReminderRecipient), nullable=False, default=ReminderRecipient.all_invitees)
    custom_message = Column(Text, nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    error_message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    event = relationship("Event", back_populates="reminders")
