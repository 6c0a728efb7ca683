"""
RSVP Tracing Service.

AWS X-Ray subsegments around attendance and event store calls.
"""

from contextlib import contextmanager
from typing import Any, Generator

from aws_lambda_powertools import Tracer


class TracingService:
    """
    X-Ray Tracing service.

    Wraps the AWS Lambda Powertools tracer.
    """

    def __init__(
        self,
        service: str = "event-rsvp",
        *,
        auto_patch: bool = True,
    ):
        """
        Initialise the tracing service.

        Args:
            service: Service name
            auto_patch: Patch boto3 and friends automatically
        """
        self._tracer = Tracer(service=service, auto_patch=auto_patch)
        self._service = service

    @contextmanager
    def trace_store_operation(
        self,
        operation: str,
        event_id: str | None = None,
    ) -> Generator[None, None, None]:
        """
        Trace an attendance store operation.

        Args:
            operation: Store operation (transact_write/batch_get/query)
            event_id: Event the operation targets
        """
        with self._tracer.provider.in_subsegment(f"attendance_{operation}") as subsegment:
            subsegment.put_annotation("operation", operation)
            if event_id is not None:
                subsegment.put_annotation("event_id", event_id)
            yield

    @contextmanager
    def trace_event_lookup(
        self,
        operation: str,
        event_id: str | None = None,
    ) -> Generator[None, None, None]:
        """
        Trace an events catalogue read.

        Args:
            operation: Lookup kind (get/list)
            event_id: Event being looked up, if any
        """
        with self._tracer.provider.in_subsegment(f"events_{operation}") as subsegment:
            subsegment.put_annotation("operation", operation)
            if event_id is not None:
                subsegment.put_annotation("event_id", event_id)
            yield
