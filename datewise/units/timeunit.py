"""TimeUnit enumeration for duration and difference units.

This module provides the TimeUnit enum representing the units a Duration
can be expressed in and a DifferenceResult is measured in.
"""

from __future__ import annotations

from enum import Enum

from datewise._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)
from datewise.errors import InvalidUnit


class TimeUnit(Enum):
    """Time units for arithmetic and difference computation.

    Values are the plural names used on the wire ("days", "months").

    Note:
        MONTHS and YEARS do not have fixed millisecond lengths due to
        variable month lengths and leap years. ``to_millis()`` returns
        None for these units.

    Examples:
        >>> TimeUnit.HOURS.to_millis()
        3600000

        >>> TimeUnit.MONTHS.to_millis() is None
        True

        >>> TimeUnit.parse("Day")
        <TimeUnit.DAYS: 'days'>
    """

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def parse(cls, value: object) -> TimeUnit:
        """Look up a unit by name.

        Names are case-insensitive and the singular form is accepted.

        Raises:
            InvalidUnit: If value does not name a unit.
        """
        if isinstance(value, TimeUnit):
            return value
        if not isinstance(value, str):
            raise InvalidUnit(f"unit must be a string, got {type(value).__name__}")
        name = value.strip().lower()
        if name and not name.endswith("s"):
            name += "s"
        try:
            return cls(name)
        except ValueError:
            raise InvalidUnit(
                f"unknown unit {value!r}; expected one of "
                f"{', '.join(u.value for u in cls)}"
            ) from None

    @classmethod
    def for_arithmetic(cls, value: object) -> TimeUnit:
        """Look up a unit accepted by date arithmetic (seconds through years).

        Raises:
            InvalidUnit: If value is not one of the seven arithmetic units.
        """
        unit = cls.parse(value)
        if unit is cls.MILLISECONDS:
            raise InvalidUnit(
                "unit 'milliseconds' is not supported for date arithmetic; "
                f"expected one of {', '.join(u.value for u in ARITHMETIC_UNITS)}"
            )
        return unit

    @property
    def is_calendar(self) -> bool:
        """Return True for the variable-length calendar units (months, years)."""
        return self in (TimeUnit.MONTHS, TimeUnit.YEARS)

    @property
    def singular(self) -> str:
        """Return the singular English name ("day" for DAYS)."""
        return self.value[:-1]

    def to_millis(self) -> int | None:
        """Convert one unit of this TimeUnit to milliseconds.

        Returns:
            The number of milliseconds in one unit, or None for
            variable-length units (MONTHS and YEARS).
        """
        return _FIXED_MILLIS.get(self)


_FIXED_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: MILLIS_PER_SECOND,
    TimeUnit.MINUTES: MILLIS_PER_MINUTE,
    TimeUnit.HOURS: MILLIS_PER_HOUR,
    TimeUnit.DAYS: MILLIS_PER_DAY,
    TimeUnit.WEEKS: MILLIS_PER_WEEK,
}

ARITHMETIC_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.SECONDS,
    TimeUnit.MINUTES,
    TimeUnit.HOURS,
    TimeUnit.DAYS,
    TimeUnit.WEEKS,
    TimeUnit.MONTHS,
    TimeUnit.YEARS,
)


__all__ = ["TimeUnit", "ARITHMETIC_UNITS"]
