"""Event lookup and listing queries."""

from dataclasses import dataclass
from typing import Any

import structlog

from ...domain.event import EventRepository
from ...domain.shared import NotFoundError
from ._validation import require_event_id

logger = structlog.get_logger()


@dataclass(frozen=True)
class GetEventQuery:
    """Query to get a single event."""

    event_id: str


class GetEventHandler:
    """Handler for GetEventQuery."""

    def __init__(self, event_repository: EventRepository):
        self._event_repo = event_repository

    async def handle(self, query: GetEventQuery) -> dict[str, Any]:
        """Handle the get event query."""
        event_id = require_event_id(query.event_id)
        event = await self._event_repo.get_by_id(event_id)
        if event is None:
            logger.info("event_not_found", event_id=event_id)
            raise NotFoundError("Event not found")
        return event


@dataclass(frozen=True)
class ListEventsQuery:
    """Query to list every event."""


class ListEventsHandler:
    """Handler for ListEventsQuery."""

    def __init__(self, event_repository: EventRepository):
        self._event_repo = event_repository

    async def handle(self, query: ListEventsQuery) -> list[dict[str, Any]]:
        """Handle the list events query."""
        return await self._event_repo.list_all()
