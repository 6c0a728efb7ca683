"""Get Stats Query and Handler."""

from dataclasses import dataclass

from ...domain.rsvp import AttendanceRepository, ResponseCounts, ResponsePolicy
from ._validation import require_event_id


@dataclass(frozen=True)
class GetStatsQuery:
    """Query to get response counts for an event."""

    event_id: str


class GetStatsHandler:
    """Handler for GetStatsQuery.

    Reads the counter records for every allowed response in one batched
    point read. Counters that were never created count as zero.
    """

    def __init__(
        self,
        attendance_repository: AttendanceRepository,
        response_policy: ResponsePolicy | None = None,
    ):
        self._attendance_repo = attendance_repository
        self._policy = response_policy or ResponsePolicy()

    async def handle(self, query: GetStatsQuery) -> ResponseCounts:
        """Handle the get stats query."""
        event_id = require_event_id(query.event_id)
        stored = await self._attendance_repo.get_counts(event_id, self._policy.allowed)
        return ResponseCounts.from_stored(event_id, self._policy.allowed, stored)
