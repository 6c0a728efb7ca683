"""RSVP Lambda Handler.

Routes API Gateway HTTP API (payload v2) requests to the RSVP command
and queries. Every response is JSON and carries permissive CORS headers.
"""

import asyncio
import json
from typing import Any, Coroutine, TypeVar

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from ...application.commands import SubmitRsvpCommand
from ...application.queries import (
    GetEventQuery,
    GetStatsQuery,
    ListAttendeesQuery,
    ListEventsQuery,
)
from ...domain.shared import (
    DependencyError,
    DuplicateRsvpError,
    RsvpServiceError,
    ValidationError,
)
from ...infrastructure.config import Settings, get_container
from ...infrastructure.observability import RsvpMetrics, configure_logging
from .responses import json_response, preflight_response

T = TypeVar("T")

_settings = Settings()
configure_logging(_settings.log_level, json_output=_settings.log_json)

# Initialize Powertools
logger = Logger(service=_settings.service_name)
tracer = Tracer(service=_settings.service_name)
rsvp_metrics = RsvpMetrics(
    namespace=_settings.metrics_namespace,
    service=_settings.service_name,
)
app = APIGatewayHttpResolver()


def _run(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)


def _json_body() -> dict[str, Any]:
    raw = app.current_event.decoded_body
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise ValidationError("Request body must be valid JSON") from None
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


@app.get("/event/<event_id>")
@tracer.capture_method
def get_event(event_id: str) -> Response:
    """Get a single event."""
    app.append_context(operation="get_event")
    logger.info("Looking for event", extra={"event_id": event_id})
    event = _run(get_container().get_event_handler.handle(GetEventQuery(event_id=event_id)))
    return json_response(event)


@app.get("/stats/<event_id>")
@tracer.capture_method
def get_stats(event_id: str) -> Response:
    """Get response counts for an event."""
    app.append_context(operation="get_stats")
    counts = _run(get_container().get_stats_handler.handle(GetStatsQuery(event_id=event_id)))
    return json_response(counts.to_dict())


@app.post("/rsvp")
@tracer.capture_method
def submit_rsvp() -> Response:
    """Record an RSVP."""
    app.append_context(operation="submit_rsvp")
    body = _json_body()
    command = SubmitRsvpCommand(
        event_id=body.get("event_id"),
        full_name=body.get("full_name"),
        email=body.get("email"),
        response=body.get("response"),
    )
    logger.info("RSVP request", extra={"event_id": command.event_id, "response": command.response})

    result = _run(get_container().submit_rsvp_handler.handle(command))
    rsvp_metrics.record_rsvp(str(command.response).strip())
    return json_response({"message": result.message})


@app.get("/attendees/<event_id>")
@tracer.capture_method
def list_attendees(event_id: str) -> Response:
    """List respondents for an event, optionally filtered by response."""
    app.append_context(operation="list_attendees")
    params = app.current_event.query_string_parameters or {}
    query = ListAttendeesQuery(event_id=event_id, response=params.get("response"))
    attendees = _run(get_container().list_attendees_handler.handle(query))
    return json_response([attendee.to_dict() for attendee in attendees])


@app.get("/events")
@tracer.capture_method
def list_events() -> Response:
    """List every event ordered by start time."""
    app.append_context(operation="list_events")
    events = _run(get_container().list_events_handler.handle(ListEventsQuery()))
    return json_response(events)


@app.not_found
def route_not_found(_: Exception) -> Response:
    return json_response({"message": "Route Not Found"}, 404)


def _current_operation() -> str:
    return app.context.get("operation", "unknown")


@app.exception_handler(RsvpServiceError)
def handle_service_error(ex: RsvpServiceError) -> Response:
    if isinstance(ex, DuplicateRsvpError):
        rsvp_metrics.record_duplicate()
    elif isinstance(ex, DependencyError):
        rsvp_metrics.record_store_fault(_current_operation())
    return json_response(ex.to_dict(), ex.status_code)


@app.exception_handler(Exception)
def handle_unexpected_error(ex: Exception) -> Response:
    operation = _current_operation()
    logger.exception("Unhandled error", extra={"path": app.current_event.path, "operation": operation})
    rsvp_metrics.record_store_fault(operation)
    return json_response(
        {"message": "Internal server error", "code": "INTERNAL_ERROR"},
        500,
    )


def _is_preflight(event: dict) -> bool:
    http = event.get("requestContext", {}).get("http", {})
    return http.get("method", event.get("httpMethod", "")).upper() == "OPTIONS"


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
@tracer.capture_lambda_handler
@rsvp_metrics.metrics.log_metrics
def handler(event: dict, context: LambdaContext) -> dict:
    """Lambda handler entry point."""
    if _is_preflight(event):
        return preflight_response()
    return app.resolve(event, context)
