"""Attendance store implementations."""

from .dynamodb_attendance_store import DynamoDBAttendanceStore
from .in_memory_attendance_store import InMemoryAttendanceStore

__all__ = ["DynamoDBAttendanceStore", "InMemoryAttendanceStore"]
