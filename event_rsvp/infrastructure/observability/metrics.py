"""
RSVP Metrics Service.

CloudWatch EMF counters for the RSVP write path, published through
AWS Lambda Powertools.
"""

from enum import Enum

from aws_lambda_powertools import Metrics
from aws_lambda_powertools.metrics import MetricUnit


class RsvpMetricName(str, Enum):
    """CloudWatch metric names."""

    RSVP_RECORDED = "RsvpRecorded"
    DUPLICATE_RSVP = "DuplicateRsvp"
    STORE_FAULT = "StoreFault"


class RsvpMetrics:
    """Counters for recorded, duplicate and failed RSVPs."""

    def __init__(
        self,
        namespace: str = "EventRsvp",
        service: str = "event-rsvp",
        metrics: Metrics | None = None,
    ):
        self._metrics = metrics or Metrics(namespace=namespace, service=service)

    @property
    def metrics(self) -> Metrics:
        """Get the Powertools Metrics instance (for ``log_metrics``)."""
        return self._metrics

    def record_rsvp(self, response: str) -> None:
        self._metrics.add_metric(
            name=RsvpMetricName.RSVP_RECORDED.value,
            unit=MetricUnit.Count,
            value=1,
        )
        self._metrics.add_metadata(key="response", value=response)

    def record_duplicate(self) -> None:
        self._metrics.add_metric(
            name=RsvpMetricName.DUPLICATE_RSVP.value,
            unit=MetricUnit.Count,
            value=1,
        )

    def record_store_fault(self, operation: str) -> None:
        self._metrics.add_metric(
            name=RsvpMetricName.STORE_FAULT.value,
            unit=MetricUnit.Count,
            value=1,
        )
        self._metrics.add_metadata(key="operation", value=operation)
