"""Tests for the RSVP aggregator."""
from planner.models.invitation import EventInvitation, RSVPStatus
from planner.services.rsvp_stats import compute_rsvp_stats


def _invites(*statuses):
    return [EventInvitation(rsvp_status=s) for s in statuses]


class TestComputeRSVPStats:

    def test_empty_list(self):
        assert compute_rsvp_stats([]) == {
            "total": 0, "attending": 0, "maybe": 0, "declined": 0, "pending": 0,
        }

    def test_counts_each_status(self):
        stats = compute_rsvp_stats(_invites(
            RSVPStatus.attending, RSVPStatus.attending, RSVPStatus.maybe,
            RSVPStatus.declined, RSVPStatus.pending, RSVPStatus.pending, RSVPStatus.pending,
        ))
        assert stats == {"total": 7, "attending": 2, "maybe": 1, "declined": 1, "pending": 3}

    def test_total_is_sum_of_counts(self):
        for statuses in ([RSVPStatus.pending], [RSVPStatus.declined] * 4, list(RSVPStatus) * 3):
            stats = compute_rsvp_stats(_invites(*statuses))
            assert stats["total"] == stats["attending"] + stats["maybe"] + stats["declined"] + stats["pending"]
            assert stats["total"] == len(statuses)

    def test_accepts_generator(self):
        stats = compute_rsvp_stats(inv for inv in _invites(RSVPStatus.maybe))
        assert stats["maybe"] == 1
