"""Event domain (read-only catalogue)."""

from .repositories import EventRepository

__all__ = ["EventRepository"]
