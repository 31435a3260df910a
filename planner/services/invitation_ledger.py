"""Invitation ledger: creation, deduplication and RSVP state for (event, contact) pairs.

The ledger trusts its inputs: existence and ownership of the event and the
contacts are checked by the caller before any of these functions run.

Each new invitation is inserted inside a SAVEPOINT. If the unique
(event_id, contact_id) constraint rejects the insert because a concurrent
request created the same pair after our existence check, only the savepoint
is rolled back and the existing row is used instead.
"""
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from planner.models.contact import Contact
from planner.models.event import Event
from planner.models.invitation import EventInvitation, RSVPStatus

logger = logging.getLogger(__name__)


def _insert(db: Session, invitation: EventInvitation) -> bool:
    """Insert one invitation in a savepoint. False if the pair already exists."""
    try:
        with db.begin_nested():
            db.add(invitation)
    except IntegrityError:
        logger.info(
            "Invitation for event %s / contact %s created concurrently",
            invitation.event_id, invitation.contact_id,
        )
        return False
    return True


def get_invitation(db: Session, event_id: str, contact_id: str) -> Optional[EventInvitation]:
    return (
        db.query(EventInvitation)
        .filter(EventInvitation.event_id == event_id, EventInvitation.contact_id == contact_id)
        .first()
    )


def bulk_invite(db: Session, event_id: str, contact_ids: Iterable[str]) -> list[EventInvitation]:
    """Create pending invitations for contacts not yet invited to the event.

    Existing invitations (and repeated IDs in ``contact_ids``) are skipped
    silently. Returns only the invitations created by this call, in input order.
    """
    created: list[EventInvitation] = []
    seen: set[str] = set()
    for contact_id in contact_ids:
        if contact_id in seen:
            continue
        seen.add(contact_id)

        if get_invitation(db, event_id, contact_id) is not None:
            continue

        invitation = EventInvitation(
            event_id=event_id,
            contact_id=contact_id,
            rsvp_status=RSVPStatus.pending,
            responded_at=None,
            response_note=None,
            is_manual_response=False,
        )
        if _insert(db, invitation):
            created.append(invitation)

    db.commit()
    for invitation in created:
        db.refresh(invitation)
    logger.info("Invited %d new contact(s) to event %s", len(created), event_id)
    return created


def record_rsvp(
    db: Session,
    event_id: str,
    contact_id: str,
    rsvp_status: RSVPStatus,
    response_note: Optional[str] = None,
    is_manual: bool = False,
) -> EventInvitation:
    """Upsert the invitation for (event, contact) with a response.

    A missing invitation is created directly in ``rsvp_status``. An existing
    one has its status, note, manual flag and responded_at overwritten; an
    omitted note clears the previous one.
    """
    now = datetime.now(timezone.utc)
    note = response_note or None

    invitation = get_invitation(db, event_id, contact_id)
    if invitation is None:
        invitation = EventInvitation(
            event_id=event_id,
            contact_id=contact_id,
            rsvp_status=rsvp_status,
            responded_at=now,
            response_note=note,
            is_manual_response=is_manual,
        )
        if not _insert(db, invitation):
            invitation = get_invitation(db, event_id, contact_id)

    invitation.rsvp_status = rsvp_status
    invitation.responded_at = now
    invitation.response_note = note
    invitation.is_manual_response = is_manual
    db.commit()
    db.refresh(invitation)
    logger.info(
        "Contact %s RSVP'd '%s' to event %s (manual=%s)",
        contact_id, rsvp_status.value, event_id, is_manual,
    )
    return invitation


def list_by_event(db: Session, event_id: str) -> list[EventInvitation]:
    """All invitations for an event, with event and contact loaded."""
    return (
        db.query(EventInvitation)
        .join(EventInvitation.contact)
        .options(joinedload(EventInvitation.event), joinedload(EventInvitation.contact))
        .filter(EventInvitation.event_id == event_id)
        .order_by(Contact.last_name, Contact.first_name)
        .all()
    )


def list_by_contact(db: Session, contact_id: str) -> list[EventInvitation]:
    """All invitations for a contact, with event and contact loaded."""
    return (
        db.query(EventInvitation)
        .join(EventInvitation.event)
        .options(joinedload(EventInvitation.event), joinedload(EventInvitation.contact))
        .filter(EventInvitation.contact_id == contact_id)
        .order_by(Event.time)
        .all()
    )


def delete_invitation(db: Session, invitation_id: str) -> bool:
    """Internal only; no route deletes invitations."""
    invitation = db.query(EventInvitation).filter(EventInvitation.invitation_id == invitation_id).first()
    if invitation is None:
        return False
    db.delete(invitation)
    db.commit()
    logger.info("Deleted invitation %s", invitation_id)
    return True
