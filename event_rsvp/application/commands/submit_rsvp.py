"""Submit RSVP Command and Handler."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from ...domain.rsvp import AttendanceRepository, ResponsePolicy, RsvpSubmission
from ...domain.shared import DuplicateRsvpError, ValidationError

logger = structlog.get_logger()


def _epoch_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SubmitRsvpCommand:
    """Command to record a respondent's answer for an event.

    Fields hold the raw request values; the handler validates them.
    """

    event_id: Any
    full_name: Any
    email: Any
    response: Any


@dataclass
class SubmitRsvpResult:
    """Result of recording an RSVP."""

    message: str = "RSVP recorded!"


class SubmitRsvpHandler:
    """Handler for SubmitRsvpCommand.

    1. Validate the request (no store call on failure)
    2. Check the response against the policy
    3. Record respondent + counter increment as one atomic write
    """

    def __init__(
        self,
        attendance_repository: AttendanceRepository,
        response_policy: ResponsePolicy | None = None,
        clock: Callable[[], int] = _epoch_millis,
    ):
        self._attendance_repo = attendance_repository
        self._policy = response_policy or ResponsePolicy()
        self._clock = clock

    async def handle(self, command: SubmitRsvpCommand) -> SubmitRsvpResult:
        """Handle the submit RSVP command."""
        try:
            submission = RsvpSubmission(
                event_id=command.event_id,
                full_name=command.full_name,
                email=command.email,
                response=command.response,
            )
        except PydanticValidationError as e:
            missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.info("rsvp_rejected_missing_fields", fields=missing)
            raise ValidationError("Missing required fields") from None

        self._policy.check(submission.response)

        try:
            await self._attendance_repo.record_response(submission, self._clock())
        except DuplicateRsvpError:
            logger.info(
                "rsvp_duplicate",
                event_id=submission.event_id,
                response=submission.response,
            )
            raise

        logger.info(
            "rsvp_recorded",
            event_id=submission.event_id,
            response=submission.response,
        )
        return SubmitRsvpResult()
