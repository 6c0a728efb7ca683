"""Attendance repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..value_objects import Attendee, RsvpSubmission


class AttendanceRepository(ABC):
    """Repository interface for the attendance store.

    One partition per event holds respondent records and the response
    counters derived from them. Implementations must record a respondent
    and bump its counter as one atomic unit.
    """

    @abstractmethod
    async def record_response(self, submission: RsvpSubmission, created_at: int) -> None:
        """Insert the respondent record and increment its response counter.

        Raises:
            DuplicateRsvpError: the respondent already answered for the event
            DependencyError: the store failed; nothing was written
        """
        pass

    @abstractmethod
    async def get_counts(self, event_id: str, responses: Sequence[str]) -> dict[str, int]:
        """Get stored counters for the given responses.

        Responses with no counter record are absent from the result.
        """
        pass

    @abstractmethod
    async def list_respondents(
        self,
        event_id: str,
        response: str | None = None,
    ) -> list[Attendee]:
        """List respondent records for an event, optionally by response."""
        pass
