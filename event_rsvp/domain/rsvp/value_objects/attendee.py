"""Attendee value object."""

from ...shared import ValueObject


class Attendee(ValueObject):
    """A respondent record as returned by attendee listings."""

    full_name: str | None = None
    email: str
    response: str | None = None
    timestamp: int | None = None

    def to_dict(self) -> dict:
        return self.model_dump()
