"""Event repository interface."""

from abc import ABC, abstractmethod
from typing import Any


class EventRepository(ABC):
    """Read-only access to the events catalogue.

    Event rows are opaque beyond ``event_id`` and ``start_at``; they are
    returned as JSON-ready dictionaries.
    """

    @abstractmethod
    async def get_by_id(self, event_id: str) -> dict[str, Any] | None:
        """Get an event by its ID."""
        pass

    @abstractmethod
    async def list_all(self) -> list[dict[str, Any]]:
        """Get all events ordered by start time, earliest first."""
        pass
