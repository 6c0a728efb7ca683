"""Shared request checks for query handlers."""

from typing import Any

from ...domain.shared import ValidationError


def require_event_id(event_id: Any) -> str:
    if event_id is None or not str(event_id).strip():
        raise ValidationError("Missing required fields")
    return str(event_id).strip()
