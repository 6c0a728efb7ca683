"""
Tests for Tracing Service.
"""

from unittest.mock import MagicMock, patch

import pytest

from event_rsvp.infrastructure.observability.tracer import TracingService


class TestTracingService:
    """TracingService tests."""

    @pytest.fixture
    def mock_powertools_tracer(self) -> MagicMock:
        """Mock the Powertools Tracer."""
        with patch(
            "event_rsvp.infrastructure.observability.tracer.Tracer"
        ) as mock_tracer_class:
            mock_instance = MagicMock()
            mock_tracer_class.return_value = mock_instance

            mock_provider = MagicMock()
            mock_instance.provider = mock_provider

            mock_subsegment = MagicMock()
            mock_provider.in_subsegment.return_value.__enter__ = MagicMock(
                return_value=mock_subsegment
            )
            mock_provider.in_subsegment.return_value.__exit__ = MagicMock(
                return_value=False
            )

            yield mock_instance

    def test_create_tracing_service(self, mock_powertools_tracer: MagicMock) -> None:
        service = TracingService(service="TestService", auto_patch=False)

        assert service._service == "TestService"
        assert service._tracer is mock_powertools_tracer

    def test_trace_store_operation(self, mock_powertools_tracer: MagicMock) -> None:
        """Store operations open an annotated subsegment."""
        service = TracingService()

        with service.trace_store_operation("transact_write", "evt1"):
            pass

        provider = mock_powertools_tracer.provider
        provider.in_subsegment.assert_called_once_with("attendance_transact_write")
        subsegment = provider.in_subsegment.return_value.__enter__.return_value
        subsegment.put_annotation.assert_any_call("operation", "transact_write")
        subsegment.put_annotation.assert_any_call("event_id", "evt1")

    def test_trace_event_lookup_without_event(self, mock_powertools_tracer: MagicMock) -> None:
        service = TracingService()

        with service.trace_event_lookup("list"):
            pass

        subsegment = mock_powertools_tracer.provider.in_subsegment.return_value.__enter__.return_value
        subsegment.put_annotation.assert_called_once_with("operation", "list")

    @pytest.mark.asyncio
    async def test_store_wraps_calls_in_subsegments(self, mock_powertools_tracer: MagicMock) -> None:
        from event_rsvp.infrastructure.persistence import DynamoDBAttendanceStore

        client = MagicMock()
        client.query.return_value = {"Items": []}
        store = DynamoDBAttendanceStore(table_name="rsvps", client=client, tracing=TracingService())

        await store.list_respondents("evt1")

        mock_powertools_tracer.provider.in_subsegment.assert_called_once_with("attendance_query")
