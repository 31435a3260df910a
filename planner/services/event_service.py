"""Event service: creation with invitations, listing, updates.

Callers resolve ownership (``OwnedResources``) before calling in here;
these functions only read and write the store.
"""
import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from planner.database import as_utc
from planner.models.event import Event
from planner.models.invitation import EventInvitation
from planner.models.user import User
from planner.services import invitation_ledger

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "address", "time")


def create_event_with_invitations(
    db: Session,
    owner: User,
    name: str,
    address: str,
    time: datetime,
    contact_ids: Optional[list[str]] = None,
) -> tuple[Event, list[EventInvitation]]:
    """Create an event and bulk-invite ``contact_ids`` in the same transaction.

    The contacts must already be verified as owned by ``owner``.
    """
    event = Event(name=name, address=address, time=as_utc(time), user_id=owner.user_id)
    db.add(event)
    db.flush()

    invitations: list[EventInvitation] = []
    if contact_ids:
        # bulk_invite commits the event along with the invitations
        invitations = invitation_ledger.bulk_invite(db, event.event_id, contact_ids)
    else:
        db.commit()
    db.refresh(event)
    logger.info(
        "Created event '%s' (%s) for user %s with %d invitation(s)",
        name, event.event_id, owner.user_id, len(invitations),
    )
    return event, invitations


def list_events_for_user(db: Session, owner: User) -> list[Event]:
    return db.query(Event).filter(Event.user_id == owner.user_id).order_by(Event.time).all()


def update_event(db: Session, event: Event, updates: dict[str, Any]) -> Event:
    """Partial update of name/address/time."""
    for field, value in updates.items():
        if field in UPDATABLE_FIELDS and value is not None:
            setattr(event, field, as_utc(value) if field == "time" else value)
    db.commit()
    db.refresh(event)
    logger.info("Updated event %s", event.event_id)
    return event


def delete_event(db: Session, event: Event) -> None:
    """Delete an event; its invitations and reminders go with it."""
    event_id = event.event_id
    db.delete(event)
    db.commit()
    logger.info("Deleted event %s", event_id)
