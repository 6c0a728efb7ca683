"""Dependency Injection Container.

Provides centralized dependency management for the application.
Store clients are process-wide: created lazily on first use, reused by
every request the process serves, and released by ``shutdown``.
"""

import atexit
import threading
from typing import Any, Callable, TypeVar

import boto3
import structlog
from botocore.config import Config as BotoConfig
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from event_rsvp.application.commands import SubmitRsvpHandler
from event_rsvp.application.queries import (
    GetEventHandler,
    GetStatsHandler,
    ListAttendeesHandler,
    ListEventsHandler,
)
from event_rsvp.domain.event import EventRepository
from event_rsvp.domain.rsvp import AttendanceRepository, ResponsePolicy
from event_rsvp.infrastructure.config.settings import Settings
from event_rsvp.infrastructure.observability import TracingService
from event_rsvp.infrastructure.persistence import (
    DynamoDBAttendanceStore,
    InMemoryAttendanceStore,
    SqlEventStore,
)

logger = structlog.get_logger()

T = TypeVar("T")

_CACHED = (
    "tracing",
    "dynamodb_client",
    "events_engine",
    "attendance_repository",
    "event_repository",
    "response_policy",
    "submit_rsvp_handler",
    "get_stats_handler",
    "list_attendees_handler",
    "get_event_handler",
    "list_events_handler",
)


class DIContainer:
    """Dependency Injection Container.

    Example usage:
        ```python
        container = DIContainer()
        result = await container.submit_rsvp_handler.handle(command)
        ```

    Repositories may be passed in directly, which skips creating the
    corresponding store clients.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        attendance_repository: AttendanceRepository | None = None,
        event_repository: EventRepository | None = None,
    ):
        """Initialize the container.

        Args:
            settings: Application settings (loads from env if not provided)
            attendance_repository: Attendance store override
            event_repository: Events catalogue override
        """
        self._settings = settings or Settings()
        self._overrides: dict[str, Any] = {}
        if attendance_repository is not None:
            self._overrides["attendance_repository"] = attendance_repository
        if event_repository is not None:
            self._overrides["event_repository"] = event_repository
        self._lock = threading.RLock()

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    def _get_or_create(self, name: str, factory: Callable[[], T]) -> T:
        """Return the cached instance ``name``, building it at most once.

        The check and the store both happen under the container lock, so
        concurrent first requests share one instance. The lock is
        re-entrant because factories resolve their own dependencies.
        """
        with self._lock:
            if name not in self.__dict__:
                self.__dict__[name] = factory()
            return self.__dict__[name]

    @property
    def tracing(self) -> TracingService | None:
        return self._get_or_create("tracing", self._create_tracing)

    def _create_tracing(self) -> TracingService | None:
        if not self._settings.enable_tracing:
            return None
        return TracingService(service=self._settings.service_name)

    @property
    def dynamodb_client(self) -> Any:
        """Get the shared DynamoDB client.

        boto3 clients are thread-safe once created; creation itself is not.
        """
        return self._get_or_create("dynamodb_client", self._create_dynamodb_client)

    def _create_dynamodb_client(self) -> Any:
        logger.info(
            "initializing_dynamodb_client",
            region=self._settings.aws_region,
            endpoint_url=self._settings.dynamodb_endpoint_url,
        )
        return boto3.client(
            "dynamodb",
            region_name=self._settings.aws_region,
            endpoint_url=self._settings.dynamodb_endpoint_url,
            config=BotoConfig(
                connect_timeout=self._settings.store_connect_timeout,
                read_timeout=self._settings.store_read_timeout,
                retries={
                    "max_attempts": self._settings.store_max_attempts,
                    "mode": "standard",
                },
            ),
        )

    @property
    def events_engine(self) -> Engine:
        """Get the shared SQLAlchemy engine for the events catalogue."""
        return self._get_or_create("events_engine", self._create_events_engine)

    def _create_events_engine(self) -> Engine:
        logger.info("initializing_events_engine")
        return create_engine(
            self._settings.events_database_url,
            pool_pre_ping=True,
            pool_recycle=self._settings.events_pool_recycle_seconds,
        )

    @property
    def attendance_repository(self) -> AttendanceRepository:
        return self._get_or_create("attendance_repository", self._create_attendance_repository)

    def _create_attendance_repository(self) -> AttendanceRepository:
        if "attendance_repository" in self._overrides:
            return self._overrides["attendance_repository"]

        backend = self._settings.attendance_backend.lower()
        if backend == "memory":
            logger.warning("using_in_memory_attendance_store")
            return InMemoryAttendanceStore()
        if backend != "dynamodb":
            raise ValueError(f"Unknown attendance backend: {self._settings.attendance_backend}")

        return DynamoDBAttendanceStore(
            table_name=self._settings.attendance_table,
            client=self.dynamodb_client,
            tracing=self.tracing,
        )

    @property
    def event_repository(self) -> EventRepository:
        return self._get_or_create("event_repository", self._create_event_repository)

    def _create_event_repository(self) -> EventRepository:
        if "event_repository" in self._overrides:
            return self._overrides["event_repository"]
        return SqlEventStore(engine=self.events_engine, tracing=self.tracing)

    @property
    def response_policy(self) -> ResponsePolicy:
        return self._get_or_create(
            "response_policy",
            lambda: ResponsePolicy(
                allowed=tuple(self._settings.allowed_responses),
                enforce=self._settings.enforce_response_set,
            ),
        )

    @property
    def submit_rsvp_handler(self) -> SubmitRsvpHandler:
        return self._get_or_create(
            "submit_rsvp_handler",
            lambda: SubmitRsvpHandler(
                attendance_repository=self.attendance_repository,
                response_policy=self.response_policy,
            ),
        )

    @property
    def get_stats_handler(self) -> GetStatsHandler:
        return self._get_or_create(
            "get_stats_handler",
            lambda: GetStatsHandler(
                attendance_repository=self.attendance_repository,
                response_policy=self.response_policy,
            ),
        )

    @property
    def list_attendees_handler(self) -> ListAttendeesHandler:
        return self._get_or_create(
            "list_attendees_handler",
            lambda: ListAttendeesHandler(
                attendance_repository=self.attendance_repository,
                response_policy=self.response_policy,
            ),
        )

    @property
    def get_event_handler(self) -> GetEventHandler:
        return self._get_or_create(
            "get_event_handler",
            lambda: GetEventHandler(event_repository=self.event_repository),
        )

    @property
    def list_events_handler(self) -> ListEventsHandler:
        return self._get_or_create(
            "list_events_handler",
            lambda: ListEventsHandler(event_repository=self.event_repository),
        )

    def shutdown(self) -> None:
        """Release store clients and drop all cached instances."""
        with self._lock:
            client = self.__dict__.get("dynamodb_client")
            if client is not None:
                client.close()

            engine = self.__dict__.get("events_engine")
            if engine is not None:
                engine.dispose()

            for attr in _CACHED:
                self.__dict__.pop(attr, None)

        logger.info("di_container_shutdown")

    def reset(self) -> None:
        """Reset all cached instances.

        Useful for testing or when configuration changes.
        """
        self.shutdown()


# Global container instance
_container: DIContainer | None = None
_container_lock = threading.Lock()


def get_container() -> DIContainer:
    """Get the global DI container instance.

    Creates the container on first call and registers its shutdown
    to run at interpreter exit.
    """
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DIContainer()
                atexit.unregister(shutdown_container)
                atexit.register(shutdown_container)
    return _container


def shutdown_container() -> None:
    """Shut down the global container, if one was created."""
    global _container
    with _container_lock:
        if _container is not None:
            _container.shutdown()
        _container = None


def reset_container() -> None:
    """Reset the global container.

    Useful for testing or reconfiguration.
    """
    shutdown_container()
