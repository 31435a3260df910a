"""Invitation / RSVP API routes."""
import logging
from fastapi import APIRouter, Depends, status

from planner.schemas.invitation import (
    EventRSVPsOut, InvitationsSentOut, RSVPOut, RSVPRequest, SendInvitationsRequest,
)
from planner.services import invitation_ledger
from planner.services.ownership import OwnedResources, get_owned_resources
from planner.services.rsvp_stats import compute_rsvp_stats
from planner.services.rsvp_status import parse_rsvp_status

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/{event_id}/invitations", response_model=InvitationsSentOut, status_code=status.HTTP_201_CREATED)
def send_invitations(
    event_id: str,
    payload: SendInvitationsRequest,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Invite contacts to an event. Contacts already invited are skipped, not reported."""
    event = owned.event(event_id)
    contact_ids = list(dict.fromkeys(payload.contact_ids))
    owned.contacts(contact_ids)

    invitations = invitation_ledger.bulk_invite(owned.db, event.event_id, contact_ids)
    return {"invitations": invitations, "count": len(invitations)}


@router.post("/{event_id}/rsvp", response_model=RSVPOut)
def submit_rsvp(
    event_id: str,
    payload: RSVPRequest,
    owned: OwnedResources = Depends(get_owned_resources),
):
    """Record a contact's response. Creates the invitation if the contact was never invited."""
    rsvp_status = parse_rsvp_status(payload.rsvp_status)

    event = owned.existing_event(event_id)
    contact = owned.contacts([payload.contact_id])[0]

    invitation = invitation_ledger.record_rsvp(
        owned.db,
        event_id=event.event_id,
        contact_id=contact.contact_id,
        rsvp_status=rsvp_status,
        response_note=payload.response_note,
        is_manual=payload.is_manual_response,
    )
    return {"invitation": invitation}


@router.get("/{event_id}/rsvps", response_model=EventRSVPsOut)
def get_event_rsvps(event_id: str, owned: OwnedResources = Depends(get_owned_resources)):
    """RSVP tallies and the full invitation list for one of the caller's events."""
    event = owned.event(event_id)
    invitations = invitation_ledger.list_by_event(owned.db, event.event_id)
    return {
        "event": event,
        "stats": compute_rsvp_stats(invitations),
        "invitations": invitations,
    }
