"""Tagged success/failure outcome of a service operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from datewise.errors import DatewiseError


@dataclass(frozen=True)
class Outcome:
    """Result of an operation: a payload on success or an error on failure.

    Attributes:
        success: True when the operation produced a payload.
        value: The payload (None on failure).
        error: The error (None on success).

    Examples:
        >>> Outcome.ok({"a": 1}).success
        True
        >>> from datewise.errors import InvalidUnit
        >>> Outcome.fail(InvalidUnit("bad unit")).message
        'bad unit'
    """

    success: bool
    value: dict[str, Any] | None = None
    error: DatewiseError | None = None

    @classmethod
    def ok(cls, value: dict[str, Any]) -> Outcome:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: DatewiseError) -> Outcome:
        return cls(success=False, error=error)

    @property
    def message(self) -> str:
        """The error message, or an empty string on success."""
        return str(self.error) if self.error is not None else ""

    @property
    def code(self) -> str | None:
        """The error code ("InvalidDateFormat", ...), or None on success."""
        return self.error.code if self.error is not None else None

    def unwrap(self) -> dict[str, Any]:
        """Return the payload, re-raising the stored error on failure.

        Raises:
            DatewiseError: The stored error, or a plain DatewiseError when
                the outcome holds neither a payload nor an error.
        """
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise DatewiseError("outcome carries no payload")
        return self.value


__all__ = ["Outcome"]
