"""Reminder API routes. Reminders are stored only; nothing here sends them."""
import logging
from fastapi import APIRouter, Depends, Query, status

from planner.errors import ValidationError
from planner.models.reminder import ReminderRecipient, ReminderType
from planner.schemas.reminder import (
    EventRemindersOut, ReminderCreate, ReminderCreatedOut, ReminderUpdate, ReminderUpdatedOut,
    UserRemindersOut,
)
from planner.services import reminder_service
from planner.services.ownership import OwnedResources, get_owned_resources

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/events/{event_id}/reminders", response_model=ReminderCreatedOut, status_code=status.HTTP_201_CREATED)
def create_reminders(
    event_id: str,
    payload: ReminderCreate,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Create one reminder at ``reminder_time``, or the standard set when ``auto_create`` is true."""
    event = owned.event(event_id)

    if payload.auto_create:
        reminders = reminder_service.create_standard_reminders(
            owned.db,
            event,
            owned.user.user_id,
            reminder_types=[payload.reminder_type or ReminderType.email],
            recipient_type=payload.recipient_type or ReminderRecipient.all_invitees,
        )
        return {"message": "Reminders created", "reminders": reminders, "count": len(reminders)}

    if payload.reminder_time is None:
        raise ValidationError("reminder_time is required (unless auto_create is true)")

    reminder = reminder_service.create_reminder(
        owned.db,
        event,
        owned.user.user_id,
        reminder_time=payload.reminder_time,
        reminder_type=payload.reminder_type,
        recipient_type=payload.recipient_type,
        custom_message=payload.custom_message,
    )
    return {"message": "Reminder created", "reminders": [reminder], "count": 1}


@router.get("/events/{event_id}/reminders", response_model=EventRemindersOut)
def list_event_reminders(event_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """All reminders for one of the caller's events."""
    event = owned.event(event_id)
    return {
        "event_id": event.event_id,
        "name": event.name,
        "time": event.time,
        "reminders": reminder_service.list_for_event(owned.db, event.event_id),
    }


@router.get("/reminders", response_model=UserRemindersOut)
def list_my_reminders(
    upcoming: bool = Query(False),
    days: int = Query(30, ge=1),
    owned: OwnedResources = Depends(get_owned_resources),
):
    """The caller's reminders (optionally only pending ones due within ``days``) plus stats."""
    user_id = owned.user.user_id
    if upcoming:
        reminders = reminder_service.list_upcoming(owned.db, user_id, days_ahead=days)
    else:
        reminders = reminder_service.list_for_user(owned.db, user_id)
    return {"reminders": reminders, "stats": reminder_service.reminder_stats(owned.db, user_id)}


@router.put("/reminders/{reminder_id}", response_model=ReminderUpdatedOut)
def update_reminder(
    reminder_id: str,
    payload: ReminderUpdate,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Change time, message or status of one of the caller's reminders."""
    reminder = owned.reminder(reminder_id)
    updated = reminder_service.update_reminder(owned.db, reminder, payload.model_dump(exclude_unset=True))
    return {"message": "Reminder updated", "reminder": updated}


@router.delete("/reminders/{reminder_id}")
def cancel_reminder(reminder_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """Cancel (not delete) one of the caller's reminders."""
    reminder_service.cancel_reminder(owned.db, owned.reminder(reminder_id))
    return {"message": "Reminder cancelled"}
