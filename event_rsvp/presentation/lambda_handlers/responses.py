"""JSON response shaping shared by the RSVP routes."""

import json
from typing import Any

from aws_lambda_powertools.event_handler import Response, content_types

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS, POST, GET, PUT, DELETE",
    "Access-Control-Allow-Headers": (
        "Content-Type,X-Amz-Date,Authorization,X-Api-Key,"
        "X-Amz-Security-Token,X-Requested-With"
    ),
    "Access-Control-Allow-Credentials": "true",
}


def json_response(payload: Any, status_code: int = 200) -> Response:
    """Build a JSON response carrying the CORS headers."""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(payload, default=str),
        headers=dict(CORS_HEADERS),
    )


def preflight_response() -> dict[str, Any]:
    """Raw Lambda proxy result for an OPTIONS preflight request."""
    return {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": "",
        "isBase64Encoded": False,
    }
