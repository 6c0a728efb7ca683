"""Base Value Object class for all domain value objects."""

from abc import ABC

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel, ABC):
    """Base class for all domain value objects.

    Value objects are immutable and compared by their attributes.
    Validation lives in field validators on the subclasses, so an
    instance that exists is always well formed.
    """

    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return False
        return type(self) is type(other) and self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((type(self).__name__, repr(sorted(self.model_dump().items()))))
