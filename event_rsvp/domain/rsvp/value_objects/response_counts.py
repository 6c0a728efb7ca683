"""Response counts value object."""

from collections.abc import Iterable, Mapping

from pydantic import field_validator

from ...shared import ValueObject


class ResponseCounts(ValueObject):
    """Number of respondents per response value for one event."""

    event_id: str
    counts: dict[str, int]

    @field_validator("counts")
    @classmethod
    def validate_counts(cls, v: dict[str, int]) -> dict[str, int]:
        """Validate that no count is negative."""
        for response, count in v.items():
            if count < 0:
                raise ValueError(f"count for {response!r} cannot be negative")
        return v

    @classmethod
    def from_stored(
        cls,
        event_id: str,
        responses: Iterable[str],
        stored: Mapping[str, int],
    ) -> "ResponseCounts":
        """Build counts covering every response, defaulting missing ones to 0."""
        return cls(
            event_id=event_id,
            counts={response: int(stored.get(response, 0)) for response in responses},
        )

    def to_dict(self) -> dict[str, int]:
        return dict(self.counts)
