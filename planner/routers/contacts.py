"""Contact API routes, including a contact's invitations and upcoming birthdays."""
import logging
from datetime import timedelta
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from planner.schemas.contact import ContactCreate, ContactOut, ContactUpdate, UpcomingBirthdaysOut
from planner.schemas.invitation import ContactInvitationsOut
from planner.services import contact_service, invitation_ledger
from planner.services.ownership import OwnedResources, get_owned_resources

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=list[ContactOut])
def list_contacts(owned: OwnedResources = Depends(get_owned_resources)):
    """List the current user's contacts."""
    return contact_service.list_contacts(owned.db, owned.user)


@router.post("/", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(payload: ContactCreate, owned: OwnedResources = Depends(get_owned_resources)):
    """Create a contact owned by the current user. Birthday fields are optional."""
    return contact_service.create_contact(owned.db, owned.user, **payload.model_dump())


# Declared before /{contact_id} so the literal path wins
@router.get("/upcoming-birthdays", response_model=UpcomingBirthdaysOut)
def upcoming_birthdays(
    days: Optional[int] = Query(None),
    weeks: Optional[int] = Query(None),
    months: Optional[int] = Query(None),
    years: Optional[int] = Query(None),
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Contacts with a birthday in the next 7..365 days (default 30)."""
    days_ahead = contact_service.resolve_birthday_window(days, weeks, months, years)
    today = contact_service.local_today(owned.user)
    upcoming = contact_service.upcoming_birthdays(owned.db, owned.user, days_ahead, today=today)

    contacts = [
        {
            **ContactOut.model_validate(item["contact"]).model_dump(),
            "next_birthday": item["next_birthday"],
            "days_until": item["days_until"],
            "turning": item["turning"],
        }
        for item in upcoming
    ]
    return {
        "days_ahead": days_ahead,
        "range": {"start": today, "end": today + timedelta(days=days_ahead)},
        "count": len(contacts),
        "contacts": contacts,
    }


@router.get("/{contact_id}", response_model=ContactOut)
def get_contact(contact_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """Fetch one of the current user's contacts."""
    return owned.contact(contact_id)


@router.put("/{contact_id}", response_model=ContactOut)
def update_contact(
    contact_id: str,
    payload: ContactUpdate,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Partially update a contact (owner only)."""
    contact = owned.contact(contact_id)
    return contact_service.update_contact(owned.db, contact, payload.model_dump(exclude_unset=True))


@router.get("/{contact_id}/invitations", response_model=ContactInvitationsOut)
def get_contact_invitations(contact_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """Every invitation this contact has received, with event details."""
    contact = owned.contact(contact_id)
    invitations = invitation_ledger.list_by_contact(owned.db, contact.contact_id)
    return {"contact": contact, "invitations": invitations}
