"""Domain errors, each mapped to an HTTP status by the handler in planner.main."""
from typing import Optional


class PlannerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(PlannerError):
    """Missing or malformed input that pydantic cannot catch on its own."""

    status_code = 400


class InvalidStatusError(ValidationError):
    """An RSVP status token outside the accepted set."""

    def __init__(self, token: object, accepted: list[str]):
        quoted = ", ".join(f'"{t}"' for t in accepted)
        super().__init__(f"Invalid rsvp_status {token!r}. Must be one of: {quoted}")
        self.token = token
        self.accepted = accepted

    def to_dict(self) -> dict:
        return {"detail": self.message, "accepted": self.accepted}


class AuthenticationError(PlannerError):
    status_code = 401


class OwnershipError(PlannerError):
    status_code = 403

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Not authorized")


class NotFoundError(PlannerError):
    status_code = 404


class ConflictError(PlannerError):
    status_code = 409
