"""Events catalogue implementations."""

from .sql_event_store import SqlEventStore

__all__ = ["SqlEventStore"]
