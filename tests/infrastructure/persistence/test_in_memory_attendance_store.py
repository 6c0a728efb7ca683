"""Tests for the in-memory Attendance Store."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from event_rsvp.domain.rsvp import RsvpSubmission
from event_rsvp.domain.shared import DuplicateRsvpError
from event_rsvp.infrastructure.persistence import InMemoryAttendanceStore


def _submission(email: str, response: str = "Yes") -> RsvpSubmission:
    return RsvpSubmission(event_id="evt1", full_name="Guest", email=email, response=response)


class TestInMemoryAttendanceStore:
    """InMemoryAttendanceStore tests."""

    @pytest.mark.asyncio
    async def test_record_and_read_back(
        self,
        in_memory_store: InMemoryAttendanceStore,
        alice_submission: RsvpSubmission,
    ):
        await in_memory_store.record_response(alice_submission, 1700000000000)

        assert await in_memory_store.get_counts("evt1", ("Yes", "No")) == {"Yes": 1}
        attendees = await in_memory_store.list_respondents("evt1")
        assert attendees[0].full_name == "Alice"
        assert attendees[0].timestamp == 1700000000000

    @pytest.mark.asyncio
    async def test_duplicate_leaves_counter_untouched(
        self,
        in_memory_store: InMemoryAttendanceStore,
        alice_submission: RsvpSubmission,
    ):
        await in_memory_store.record_response(alice_submission, 1)

        with pytest.raises(DuplicateRsvpError):
            await in_memory_store.record_response(_submission("a@x.com", "No"), 2)

        assert await in_memory_store.get_counts("evt1", ("Yes", "No")) == {"Yes": 1}

    @pytest.mark.asyncio
    async def test_filter_by_response(self, in_memory_store: InMemoryAttendanceStore):
        await in_memory_store.record_response(_submission("a@x.com", "Yes"), 1)
        await in_memory_store.record_response(_submission("b@x.com", "No"), 2)

        attendees = await in_memory_store.list_respondents("evt1", response="No")

        assert [a.email for a in attendees] == ["b@x.com"]

    def test_concurrent_submissions_keep_counter_exact(
        self,
        in_memory_store: InMemoryAttendanceStore,
    ):
        """Test racing writers: distinct emails all count, repeats never do."""
        emails = [f"user{i % 25}@x.com" for i in range(100)]

        def submit(email: str) -> bool:
            try:
                asyncio.run(in_memory_store.record_response(_submission(email), 0))
                return True
            except DuplicateRsvpError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(submit, emails))

        assert results.count(True) == 25
        counts = asyncio.run(in_memory_store.get_counts("evt1", ("Yes",)))
        assert counts == {"Yes": 25}
        assert len(asyncio.run(in_memory_store.list_respondents("evt1"))) == 25
