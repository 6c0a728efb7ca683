"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "EventRsvpTest")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "event-rsvp-test")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("APP_ENABLE_TRACING", "false")
os.environ.setdefault("APP_LOG_JSON", "false")

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from event_rsvp.domain.rsvp import ResponsePolicy, RsvpSubmission
from event_rsvp.infrastructure.persistence import (
    DynamoDBAttendanceStore,
    InMemoryAttendanceStore,
    SqlEventStore,
)
from tests.fakes import FakeDynamoDBClient

TABLE_NAME = "event-rsvp-responses-test"


@pytest.fixture
def response_policy() -> ResponsePolicy:
    """Create the default Yes/No response policy."""
    return ResponsePolicy(allowed=("Yes", "No"), enforce=True)


@pytest.fixture
def alice_submission() -> RsvpSubmission:
    """Create Alice's RSVP for evt1."""
    return RsvpSubmission(
        event_id="evt1",
        full_name="Alice",
        email="a@x.com",
        response="Yes",
    )


@pytest.fixture
def in_memory_store() -> InMemoryAttendanceStore:
    """Create an empty in-memory attendance store."""
    return InMemoryAttendanceStore()


@pytest.fixture
def fake_dynamodb() -> FakeDynamoDBClient:
    """Create a fake DynamoDB client holding an empty table."""
    return FakeDynamoDBClient()


@pytest.fixture
def dynamodb_store(fake_dynamodb: FakeDynamoDBClient) -> DynamoDBAttendanceStore:
    """Create a DynamoDB attendance store over the fake client."""
    return DynamoDBAttendanceStore(
        table_name=TABLE_NAME,
        client=fake_dynamodb,
        retry_backoff_seconds=0,
    )


@pytest.fixture
def mock_attendance_repository() -> AsyncMock:
    """Create a mock attendance repository."""
    mock = AsyncMock()
    mock.record_response.return_value = None
    mock.get_counts.return_value = {}
    mock.list_respondents.return_value = []
    return mock


@pytest.fixture
def events_engine() -> Engine:
    """Create an in-memory SQLite events catalogue with three events."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE events ("
            " event_id TEXT PRIMARY KEY,"
            " title TEXT NOT NULL,"
            " venue TEXT,"
            " start_at TEXT NOT NULL)"
        ))
        conn.execute(
            text(
                "INSERT INTO events (event_id, title, venue, start_at)"
                " VALUES (:event_id, :title, :venue, :start_at)"
            ),
            [
                {"event_id": "evt2", "title": "Hack Night", "venue": "Lab", "start_at": "2026-11-20T19:00:00"},
                {"event_id": "evt1", "title": "Meetup", "venue": "Hall A", "start_at": "2026-11-01T18:00:00"},
                {"event_id": "evt3", "title": "Workshop", "venue": None, "start_at": "2026-12-05T09:30:00"},
            ],
        )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_event_store(events_engine: Engine) -> SqlEventStore:
    """Create an events store over the SQLite catalogue."""
    return SqlEventStore(engine=events_engine)


@dataclass
class FakeLambdaContext:
    """Minimal Lambda context for handler tests."""

    function_name: str = "event-rsvp"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:event-rsvp"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a Lambda context."""
    return FakeLambdaContext()
