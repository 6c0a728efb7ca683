"""Persistence layer - attendance store and events catalogue."""

from .attendance import DynamoDBAttendanceStore, InMemoryAttendanceStore
from .events import SqlEventStore

__all__ = ["DynamoDBAttendanceStore", "InMemoryAttendanceStore", "SqlEventStore"]
