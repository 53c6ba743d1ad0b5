"""Datewise exception hierarchy.

All Datewise-specific exceptions inherit from DatewiseError. The service
layer turns any of them into a failed Outcome instead of letting it escape.
"""

from __future__ import annotations


class DatewiseError(Exception):
    """Base exception for all Datewise errors."""

    @property
    def code(self) -> str:
        """Return a stable machine-readable error code (the class name)."""
        return type(self).__name__


class InvalidDateFormat(DatewiseError):
    """Failed to parse a date/time literal.

    Raised when a string does not match the accepted ISO 8601 grammar or
    one of its fields is out of range.

    Examples:
        - "not-a-date"
        - "2024-02-30"
        - "2024-01-15T25:00:00"
    """

    pass


class InvalidTimezone(DatewiseError):
    """Invalid or unknown timezone identifier.

    Examples:
        - "Mars/Olympus_Mons"
        - "+15:00" (offset beyond 14 hours)
        - "" (empty identifier)
    """

    pass


class InvalidUnit(DatewiseError):
    """Unit value outside the enumerated unit set.

    Examples:
        - "fortnights"
        - "milliseconds" passed to date arithmetic
    """

    pass


class InvalidAmount(DatewiseError):
    """Non-integer, non-finite or out-of-range duration amount.

    Examples:
        - 1.5
        - float("nan")
        - an amount that moves the date past year 9999
    """

    pass


__all__ = [
    "DatewiseError",
    "InvalidDateFormat",
    "InvalidTimezone",
    "InvalidUnit",
    "InvalidAmount",
]
