"""Application queries (CQRS read side)."""

from .get_event import GetEventHandler, GetEventQuery, ListEventsHandler, ListEventsQuery
from .get_stats import GetStatsHandler, GetStatsQuery
from .list_attendees import ListAttendeesHandler, ListAttendeesQuery

__all__ = [
    "GetEventQuery",
    "GetEventHandler",
    "ListEventsQuery",
    "ListEventsHandler",
    "GetStatsQuery",
    "GetStatsHandler",
    "ListAttendeesQuery",
    "ListAttendeesHandler",
]
