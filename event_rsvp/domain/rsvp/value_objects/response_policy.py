"""Response policy value object."""

from pydantic import field_validator

from ...shared import ValidationError, ValueObject

DEFAULT_RESPONSES: tuple[str, ...] = ("Yes", "No")


class ResponsePolicy(ValueObject):
    """The closed set of answers a respondent may give.

    With ``enforce`` off any non-empty answer is accepted and gets its own
    counter, but statistics are still reported for ``allowed`` only.
    """

    allowed: tuple[str, ...] = DEFAULT_RESPONSES
    enforce: bool = True

    @field_validator("allowed")
    @classmethod
    def validate_allowed(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that at least one response is allowed."""
        cleaned = tuple(dict.fromkeys(r.strip() for r in v if r and r.strip()))
        if not cleaned:
            raise ValueError("At least one allowed response is required")
        return cleaned

    def check(self, response: str) -> str:
        """Return ``response`` if acceptable, raise ValidationError otherwise."""
        if self.enforce and response not in self.allowed:
            raise ValidationError(
                f"Invalid response {response!r}, expected one of: {', '.join(self.allowed)}"
            )
        return response
