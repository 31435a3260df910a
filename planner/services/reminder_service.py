"""Reminder storage. Reminders are scheduled and tracked here but never sent."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session

from planner.database import as_utc
from planner.models.event import Event
from planner.models.reminder import (
    EventReminder, ReminderRecipient, ReminderStatus, ReminderType,
)

logger = logging.getLogger(__name__)

# Standard offsets before the event time used by auto-create
STANDARD_OFFSETS = (
    timedelta(days=7),
    timedelta(days=1),
    timedelta(hours=2),
)


def create_reminder(
    db: Session,
    event: Event,
    user_id: str,
    reminder_time: datetime,
    reminder_type: Optional[ReminderType] = None,
    recipient_type: Optional[ReminderRecipient] = None,
    custom_message: Optional[str] = None,
) -> EventReminder:
    reminder = EventReminder(
        event_id=event.event_id,
        user_id=user_id,
        reminder_time=as_utc(reminder_time),
        reminder_type=reminder_type or ReminderType.email,
        recipient_type=recipient_type or ReminderRecipient.all_invitees,
        status=ReminderStatus.pending,
        custom_message=custom_message or None,
    )
    db.add(reminder)
    db.commit()
    db.refresh(reminder)
    logger.info("Created %s reminder %s for event %s", reminder.reminder_type.value, reminder.reminder_id, event.event_id)
    return reminder


def create_standard_reminders(
    db: Session,
    event: Event,
    user_id: str,
    reminder_types: Iterable[ReminderType] = (ReminderType.email,),
    recipient_type: Optional[ReminderRecipient] = None,
    now: Optional[datetime] = None,
) -> list[EventReminder]:
    """One reminder per (standard offset, type), skipping any that would already be past."""
    now = as_utc(now or datetime.now(timezone.utc))
    event_time = as_utc(event.time)

    reminders = []
    for offset in STANDARD_OFFSETS:
        reminder_time = event_time - offset
        if reminder_time <= now:
            continue
        for reminder_type in reminder_types:
            reminder = EventReminder(
                event_id=event.event_id,
                user_id=user_id,
                reminder_time=reminder_time,
                reminder_type=reminder_type,
                recipient_type=recipient_type or ReminderRecipient.all_invitees,
                status=ReminderStatus.pending,
            )
            db.add(reminder)
            reminders.append(reminder)

    db.commit()
    for reminder in reminders:
        db.refresh(reminder)
    logger.info("Created %d standard reminder(s) for event %s", len(reminders), event.event_id)
    return reminders


def list_for_event(db: Session, event_id: str) -> list[EventReminder]:
    return (
        db.query(EventReminder)
        .filter(EventReminder.event_id == event_id)
        .order_by(EventReminder.reminder_time)
        .all()
    )


def list_for_user(db: Session, user_id: str) -> list[EventReminder]:
    return (
        db.query(EventReminder)
        .filter(EventReminder.user_id == user_id)
        .order_by(EventReminder.reminder_time)
        .all()
    )


def list_upcoming(
    db: Session,
    user_id: str,
    days_ahead: int = 30,
    now: Optional[datetime] = None,
) -> list[EventReminder]:
    """Pending reminders due after ``now`` and within ``days_ahead`` days."""
    now = as_utc(now or datetime.now(timezone.utc))
    return (
        db.query(EventReminder)
        .filter(
            EventReminder.user_id == user_id,
            EventReminder.status == ReminderStatus.pending,
            EventReminder.reminder_time > now,
            EventReminder.reminder_time <= now + timedelta(days=days_ahead),
        )
        .order_by(EventReminder.reminder_time)
        .all()
    )


def find_pending(db: Session, before: Optional[datetime] = None) -> list[EventReminder]:
    """Pending reminders across all users, optionally only those due before ``before``."""
    query = db.query(EventReminder).filter(EventReminder.status == ReminderStatus.pending)
    if before is not None:
        query = query.filter(EventReminder.reminder_time < as_utc(before))
    return query.order_by(EventReminder.reminder_time).all()


def update_reminder(db: Session, reminder: EventReminder, updates: dict[str, Any]) -> EventReminder:
    for field in ("reminder_time", "custom_message", "status"):
        if field in updates and (updates[field] is not None or field == "custom_message"):
            value = updates[field]
            if field == "reminder_time":
                value = as_utc(value)
            setattr(reminder, field, value)
    db.commit()
    db.refresh(reminder)
    logger.info("Updated reminder %s", reminder.reminder_id)
    return reminder


def mark_sent(db: Session, reminder: EventReminder) -> EventReminder:
    reminder.sent_at = datetime.now(timezone.utc)
    return update_reminder(db, reminder, {"status": ReminderStatus.sent})


def mark_failed(db: Session, reminder: EventReminder, error_message: str) -> EventReminder:
    reminder.error_message = error_message
    return update_reminder(db, reminder, {"status": ReminderStatus.failed})


def cancel_reminder(db: Session, reminder: EventReminder) -> EventReminder:
    logger.info("Cancelling reminder %s", reminder.reminder_id)
    return update_reminder(db, reminder, {"status": ReminderStatus.cancelled})


def reminder_stats(db: Session, user_id: str) -> dict[str, int]:
    """Counts per status for a user's reminders; ``total`` is their sum."""
    reminders = list_for_user(db, user_id)
    stats = {status.value: 0 for status in ReminderStatus}
    for reminder in reminders:
        stats[reminder.status.value] += 1
    stats["total"] = len(reminders)
    return stats
