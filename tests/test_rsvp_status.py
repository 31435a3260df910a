"""Tests for RSVP status token normalization."""
import pytest

from planner.errors import InvalidStatusError, ValidationError
from planner.models.invitation import RSVPStatus
from planner.services.rsvp_status import ACCEPTED_TOKENS, parse_rsvp_status


class TestParseRSVPStatus:

    @pytest.mark.parametrize("token", ["attending", "ATTENDING", " attending ", "Attending", "\tattending\n"])
    def test_attending_variants(self, token):
        assert parse_rsvp_status(token) is RSVPStatus.attending

    def test_maybe(self):
        assert parse_rsvp_status("Maybe") is RSVPStatus.maybe

    @pytest.mark.parametrize("token", ["declined", "regretfully decline", "regretfully_decline",
                                       "  Regretfully Decline "])
    def test_declined_variants(self, token):
        assert parse_rsvp_status(token) is RSVPStatus.declined

    @pytest.mark.parametrize("token", ["pending", "yes", "", "attend", "regretfully  decline", None, 1])
    def test_rejected(self, token):
        with pytest.raises(InvalidStatusError) as exc_info:
            parse_rsvp_status(token)
        assert exc_info.value.accepted == ACCEPTED_TOKENS

    def test_invalid_status_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_rsvp_status("nope")

    def test_accepted_tokens_listed(self):
        assert ACCEPTED_TOKENS == [
            "attending", "maybe", "declined", "regretfully decline", "regretfully_decline",
        ]
