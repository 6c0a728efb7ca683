"""RSVP repository interfaces."""

from .attendance_repository import AttendanceRepository

__all__ = ["AttendanceRepository"]
