"""SQL events catalogue implementation."""

from contextlib import nullcontext
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, ContextManager

import structlog
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ....domain.event import EventRepository
from ....domain.shared import DependencyError
from ...observability import TracingService

logger = structlog.get_logger()

GET_EVENT_SQL = text("SELECT * FROM events WHERE event_id = :event_id")
LIST_EVENTS_SQL = text("SELECT * FROM events ORDER BY start_at ASC")


class SqlEventStore(EventRepository):
    """Read-only access to the relational ``events`` table.

    The engine is shared across requests; each call checks a connection
    out of its pool and returns it when done.
    """

    def __init__(self, engine: Engine, tracing: TracingService | None = None):
        self._engine = engine
        self._tracing = tracing

    def _trace(self, operation: str, event_id: str | None = None) -> ContextManager[None]:
        if self._tracing is None:
            return nullcontext()
        return self._tracing.trace_event_lookup(operation, event_id)

    async def get_by_id(self, event_id: str) -> dict[str, Any] | None:
        try:
            with self._trace("get", event_id), self._engine.connect() as conn:
                row = conn.execute(GET_EVENT_SQL, {"event_id": event_id}).mappings().first()
        except SQLAlchemyError as e:
            logger.error("event_lookup_failed", event_id=event_id, operation="get_event", error=str(e))
            raise DependencyError() from e

        return _to_json_ready(row) if row is not None else None

    async def list_all(self) -> list[dict[str, Any]]:
        try:
            with self._trace("list"), self._engine.connect() as conn:
                rows = conn.execute(LIST_EVENTS_SQL).mappings().all()
        except SQLAlchemyError as e:
            logger.error("event_listing_failed", operation="list_events", error=str(e))
            raise DependencyError() from e

        return [_to_json_ready(row) for row in rows]


def _to_json_ready(row: Any) -> dict[str, Any]:
    return {key: _json_value(value) for key, value in dict(row).items()}


def _json_value(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value
