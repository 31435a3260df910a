"""RSVP aggregator: per-event tallies computed from an invitation list."""
from collections import Counter
from typing import Iterable

from planner.models.invitation import EventInvitation, RSVPStatus


def compute_rsvp_stats(invitations: Iterable[EventInvitation]) -> dict[str, int]:
    """Count invitations per status. ``total`` is always the sum of the four counts."""
    counts = Counter(inv.rsvp_status for inv in invitations)
    stats = {status.value: counts.get(status, 0) for status in
             (RSVPStatus.attending, RSVPStatus.maybe, RSVPStatus.declined, RSVPStatus.pending)}
    stats["total"] = sum(stats.values())
    return stats
