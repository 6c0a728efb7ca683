"""
Observability Infrastructure.

structlog logging plus AWS Lambda Powertools tracing and metrics
for the RSVP write path and store reads.
"""

from .logging_config import configure_logging
from .metrics import RsvpMetrics
from .tracer import TracingService

__all__ = [
    "configure_logging",
    "RsvpMetrics",
    "TracingService",
]
