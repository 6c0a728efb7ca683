"""Application commands (CQRS write side)."""

from .submit_rsvp import SubmitRsvpCommand, SubmitRsvpHandler, SubmitRsvpResult

__all__ = ["SubmitRsvpCommand", "SubmitRsvpHandler", "SubmitRsvpResult"]
