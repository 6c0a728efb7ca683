"""Application layer - RSVP commands and queries."""
