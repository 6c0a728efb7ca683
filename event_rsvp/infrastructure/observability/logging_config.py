"""structlog configuration."""

import logging

import structlog


def configure_logging(log_level: str = "INFO", *, json_output: bool = True) -> None:
    """Configure structlog for the process.

    Args:
        log_level: Minimum level name (DEBUG, INFO, ...)
        json_output: Render JSON lines (CloudWatch) instead of console output
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
