"""RSVP status normalizer: maps caller-supplied tokens to RSVPStatus.

Callers can only respond; ``pending`` is the state an invitation starts in
and is never accepted as a token.
"""
from planner.errors import InvalidStatusError
from planner.models.invitation import RSVPStatus

STATUS_TOKENS: dict[str, RSVPStatus] = {
    "attending": RSVPStatus.attending,
    "maybe": RSVPStatus.maybe,
    "declined": RSVPStatus.declined,
    "regretfully decline": RSVPStatus.declined,
    "regretfully_decline": RSVPStatus.declined,
}

ACCEPTED_TOKENS: list[str] = list(STATUS_TOKENS)


def parse_rsvp_status(token: object) -> RSVPStatus:
    """Return the canonical status for ``token`` or raise InvalidStatusError."""
    if not isinstance(token, str):
        raise InvalidStatusError(token, ACCEPTED_TOKENS)
    status = STATUS_TOKENS.get(token.strip().lower())
    if status is None:
        raise InvalidStatusError(token, ACCEPTED_TOKENS)
    return status
