"""RSVP domain."""

from .repositories import AttendanceRepository
from .value_objects import (
    DEFAULT_RESPONSES,
    Attendee,
    ResponseCounts,
    ResponsePolicy,
    RsvpSubmission,
)

__all__ = [
    "AttendanceRepository",
    "Attendee",
    "ResponseCounts",
    "ResponsePolicy",
    "RsvpSubmission",
    "DEFAULT_RESPONSES",
]
