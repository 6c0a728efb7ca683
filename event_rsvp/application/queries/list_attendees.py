"""List Attendees Query and Handler."""

from dataclasses import dataclass

from ...domain.rsvp import AttendanceRepository, Attendee, ResponsePolicy
from ._validation import require_event_id


@dataclass(frozen=True)
class ListAttendeesQuery:
    """Query to list respondents for an event."""

    event_id: str
    response: str | None = None


class ListAttendeesHandler:
    """Handler for ListAttendeesQuery."""

    def __init__(
        self,
        attendance_repository: AttendanceRepository,
        response_policy: ResponsePolicy | None = None,
    ):
        self._attendance_repo = attendance_repository
        self._policy = response_policy or ResponsePolicy()

    async def handle(self, query: ListAttendeesQuery) -> list[Attendee]:
        """Handle the list attendees query."""
        event_id = require_event_id(query.event_id)
        response = query.response.strip() if query.response else None
        if response:
            self._policy.check(response)

        attendees = await self._attendance_repo.list_respondents(event_id, response=response)
        if response:
            attendees = [a for a in attendees if a.response == response]
        return attendees
