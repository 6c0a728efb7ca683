"""Tests for the SQL events catalogue."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from event_rsvp.domain.shared import DependencyError
from event_rsvp.infrastructure.persistence import SqlEventStore
from event_rsvp.infrastructure.persistence.events.sql_event_store import _json_value


class TestSqlEventStore:
    """SqlEventStore tests."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, sql_event_store: SqlEventStore):
        event = await sql_event_store.get_by_id("evt1")

        assert event == {
            "event_id": "evt1",
            "title": "Meetup",
            "venue": "Hall A",
            "start_at": "2026-11-01T18:00:00",
        }

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, sql_event_store: SqlEventStore):
        assert await sql_event_store.get_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_start(self, sql_event_store: SqlEventStore):
        events = await sql_event_store.list_all()

        assert [e["event_id"] for e in events] == ["evt1", "evt2", "evt3"]

    @pytest.mark.asyncio
    async def test_database_error_is_dependency_error(self, events_engine: Engine):
        with events_engine.begin() as conn:
            conn.execute(text("DROP TABLE events"))
        store = SqlEventStore(engine=events_engine)

        with pytest.raises(DependencyError) as exc_info:
            await store.list_all()

        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_lookup_traced(self, events_engine: Engine):
        tracing = MagicMock()
        store = SqlEventStore(engine=events_engine, tracing=tracing)

        await store.get_by_id("evt2")

        tracing.trace_event_lookup.assert_called_once_with("get", "evt2")


class TestJsonValue:
    """Tests for row value conversion."""

    def test_datetime_rendered_iso(self):
        assert _json_value(datetime(2026, 11, 1, 18, 0)) == "2026-11-01T18:00:00"

    def test_decimal_rendered_as_number(self):
        assert _json_value(Decimal("12")) == 12
        assert _json_value(Decimal("12.5")) == 12.5

    def test_other_values_unchanged(self):
        assert _json_value("Hall A") == "Hall A"
        assert _json_value(None) is None
