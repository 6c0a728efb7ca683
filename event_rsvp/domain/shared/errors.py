"""Error taxonomy shared by every layer.

Each error carries the HTTP status and machine-readable code the
presentation layer reports, plus a message that is safe to show callers.
"""


class RsvpServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        """Render the error as a response body."""
        return {"message": self.message, "code": self.code}


class ValidationError(RsvpServiceError):
    """Raised when a request is missing fields or carries invalid values."""

    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Missing required fields"


class NotFoundError(RsvpServiceError):
    """Raised when an event or route does not exist."""

    status_code = 404
    code = "NOT_FOUND"
    default_message = "Not found"


class DuplicateRsvpError(RsvpServiceError):
    """Raised when a respondent has already answered for an event."""

    status_code = 409
    code = "DUPLICATE_RSVP"
    default_message = "You have already RSVP'd for this event with this email!"


class DependencyError(RsvpServiceError):
    """Raised when a backing store fails or is unreachable."""

    status_code = 500
    code = "DEPENDENCY_FAULT"
    default_message = "An unexpected error occurred, please try again later"
