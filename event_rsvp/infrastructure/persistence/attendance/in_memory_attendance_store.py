"""In-memory Attendance Store implementation."""

import threading
from collections.abc import Sequence
from typing import Any

import structlog

from ....domain.rsvp import AttendanceRepository, Attendee, RsvpSubmission
from ....domain.rsvp import keys
from ....domain.shared import DuplicateRsvpError

logger = structlog.get_logger()


class InMemoryAttendanceStore(AttendanceRepository):
    """Process-local attendance store for development and tests.

    Uses the same pk/sk layout as the DynamoDB table. A single lock
    covers the existence check and both writes, which gives the same
    all-or-nothing behaviour as the DynamoDB transaction.
    """

    def __init__(self) -> None:
        self._items: dict[tuple[str, str], dict[str, Any]] = {}
        self._lock = threading.Lock()

    async def record_response(self, submission: RsvpSubmission, created_at: int) -> None:
        respondent = keys.respondent_key(submission.event_id, submission.email)
        counter = keys.counter_key(submission.event_id, submission.response)
        respondent_id = (respondent[keys.PARTITION_KEY], respondent[keys.SORT_KEY])
        counter_id = (counter[keys.PARTITION_KEY], counter[keys.SORT_KEY])

        with self._lock:
            if respondent_id in self._items:
                raise DuplicateRsvpError()

            current = self._items.get(counter_id, counter)
            new_counter = {**current, "count": int(current.get("count", 0)) + 1}
            new_respondent = {
                **respondent,
                "full_name": submission.full_name,
                "email": submission.email,
                "response": submission.response,
                "created_at": created_at,
            }

            self._items[respondent_id] = new_respondent
            self._items[counter_id] = new_counter

        logger.debug("respondent_stored_in_memory", event_id=submission.event_id)

    async def get_counts(self, event_id: str, responses: Sequence[str]) -> dict[str, int]:
        pk = keys.event_partition_key(event_id)
        counts: dict[str, int] = {}
        with self._lock:
            for response in responses:
                item = self._items.get((pk, keys.counter_sort_key(response)))
                if item is not None:
                    counts[response] = int(item["count"])
        return counts

    async def list_respondents(
        self,
        event_id: str,
        response: str | None = None,
    ) -> list[Attendee]:
        pk = keys.event_partition_key(event_id)
        with self._lock:
            items = [
                dict(item)
                for (item_pk, item_sk), item in sorted(self._items.items())
                if item_pk == pk and item_sk.startswith(keys.RESPONDENT_PREFIX)
            ]

        return [
            Attendee(
                full_name=item["full_name"],
                email=item["email"],
                response=item["response"],
                timestamp=item["created_at"],
            )
            for item in items
            if response is None or item["response"] == response
        ]
