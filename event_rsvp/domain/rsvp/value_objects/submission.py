"""RSVP submission value object."""

from typing import Any

from pydantic import field_validator

from ...shared import ValueObject


class RsvpSubmission(ValueObject):
    """A respondent's answer for one event.

    The email is the uniqueness key within the event, so it is
    normalised to lower case.
    """

    event_id: str
    full_name: str
    email: str
    response: str

    @field_validator("event_id", "full_name", "email", "response", mode="before")
    @classmethod
    def validate_required(cls, v: Any) -> str:
        """Validate that the field is present and not blank."""
        if v is None or isinstance(v, (dict, list, bool)):
            raise ValueError("field is required")
        value = str(v).strip()
        if not value:
            raise ValueError("field is required")
        return value

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.lower()
