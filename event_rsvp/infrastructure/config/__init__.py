"""Infrastructure configuration module.

Contains application settings and the DI container.
"""

from event_rsvp.infrastructure.config.settings import Settings
from event_rsvp.infrastructure.config.di_container import (
    DIContainer,
    get_container,
    reset_container,
    shutdown_container,
)

__all__ = [
    "Settings",
    "DIContainer",
    "get_container",
    "reset_container",
    "shutdown_container",
]
