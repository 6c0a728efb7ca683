"""Shared domain components."""

from .errors import (
    DependencyError,
    DuplicateRsvpError,
    NotFoundError,
    RsvpServiceError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "ValueObject",
    "RsvpServiceError",
    "ValidationError",
    "NotFoundError",
    "DuplicateRsvpError",
    "DependencyError",
]
