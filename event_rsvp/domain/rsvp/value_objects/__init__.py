"""RSVP value objects."""

from .attendee import Attendee
from .response_counts import ResponseCounts
from .response_policy import DEFAULT_RESPONSES, ResponsePolicy
from .submission import RsvpSubmission

__all__ = [
    "Attendee",
    "ResponseCounts",
    "ResponsePolicy",
    "DEFAULT_RESPONSES",
    "RsvpSubmission",
]
