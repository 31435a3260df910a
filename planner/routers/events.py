"""Event API routes: creation with invitations plus owner-only CRUD."""
import logging
from fastapi import APIRouter, Depends, status

from planner.schemas.event import EventCreate, EventOut, EventUpdate
from planner.schemas.invitation import EventCreatedOut
from planner.services import event_service
from planner.services.ownership import OwnedResources, get_owned_resources

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=EventCreatedOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, owned: OwnedResources = Depends(get_owned_resources)):
    """Create an event and invite the given contacts (all must belong to the caller)."""
    contact_ids = list(dict.fromkeys(payload.contact_ids))
    # Validate every contact before anything is written
    owned.contacts(contact_ids)

    event, invitations = event_service.create_event_with_invitations(
        db=owned.db,
        owner=owned.user,
        name=payload.name,
        address=payload.address,
        time=payload.time,
        contact_ids=contact_ids,
    )
    return {"event": event, "invitations": invitations, "invitation_count": len(invitations)}


@router.get("/", response_model=list[EventOut])
def list_my_events(owned: OwnedResources = Depends(get_owned_resources)):
    """List the current user's events, soonest first."""
    return event_service.list_events_for_user(owned.db, owned.user)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """Fetch one of the current user's events."""
    return owned.event(event_id)


@router.put("/{event_id}", response_model=EventOut)
def update_event(
    event_id: str,
    payload: EventUpdate,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Update name/address/time (owner only)."""
    event = owned.event(event_id)
    return event_service.update_event(owned.db, event, payload.model_dump(exclude_unset=True))


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """Delete an event with its invitations and reminders (owner only)."""
    event_service.delete_event(owned.db, owned.event(event_id))
