"""Capability-checked lookups: resources resolved on behalf of one user.

Routers get an ``OwnedResources`` from the ``get_owned_resources``
dependency and never compare owner IDs themselves.
"""
import logging
from typing import Iterable

from fastapi import Depends
from sqlalchemy.orm import Session

from planner.auth import get_current_user
from planner.database import get_db
from planner.errors import NotFoundError, OwnershipError, ValidationError
from planner.models.contact import Contact
from planner.models.event import Event
from planner.models.reminder import EventReminder
from planner.models.user import User

logger = logging.getLogger(__name__)


class OwnedResources:
    def __init__(self, db: Session, user: User):
        self.db = db
        self.user = user

    def event(self, event_id: str) -> Event:
        event = self.existing_event(event_id)
        if event.user_id != self.user.user_id:
            logger.warning("User %s denied access to event %s", self.user.user_id, event_id)
            raise OwnershipError()
        return event

    def existing_event(self, event_id: str) -> Event:
        """Any user's event; only existence is checked."""
        event = self.db.query(Event).filter(Event.event_id == event_id).first()
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def contact(self, contact_id: str) -> Contact:
        contact = self.db.query(Contact).filter(Contact.contact_id == contact_id).first()
        if contact is None:
            raise NotFoundError("Contact not found")
        if contact.user_id != self.user.user_id:
            logger.warning("User %s denied access to contact %s", self.user.user_id, contact_id)
            raise OwnershipError()
        return contact

    def contacts(self, contact_ids: Iterable[str]) -> list[Contact]:
        """Resolve every ID; the first missing or foreign one fails the whole batch."""
        contacts = []
        for contact_id in contact_ids:
            contact = self.db.query(Contact).filter(Contact.contact_id == contact_id).first()
            if contact is None or contact.user_id != self.user.user_id:
                raise ValidationError(f"Contact {contact_id} not found or doesn't belong to you")
            contacts.append(contact)
        return contacts

    def reminder(self, reminder_id: str) -> EventReminder:
        reminder = self.db.query(EventReminder).filter(EventReminder.reminder_id == reminder_id).first()
        if reminder is None:
            raise NotFoundError("Reminder not found")
        if reminder.user_id != self.user.user_id:
            raise OwnershipError()
        return reminder


def get_owned_resources(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> OwnedResources:
    return OwnedResources(db, user)
