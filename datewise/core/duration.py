"""Duration: a signed amount of a single time unit.

Fixed-length units (seconds through weeks) denote an exact millisecond
span. Months and years are calendar-relative and only have a length once
they are applied to a moment in a zone.
"""

from __future__ import annotations

from dataclasses import dataclass

from datewise._internal.validation import validate_amount
from datewise.units.timeunit import TimeUnit


@dataclass(frozen=True)
class Duration:
    """A signed integer amount of one arithmetic unit.

    Attributes:
        amount: Signed number of units.
        unit: One of the seven arithmetic units (seconds through years).

    Examples:
        >>> d = Duration.of(3, "days")
        >>> d.fixed_millis
        259200000

        >>> Duration.of(1, "months").fixed_millis is None
        True

        >>> -Duration.of(2, "weeks")
        Duration(amount=-2, unit=<TimeUnit.WEEKS: 'weeks'>)
    """

    amount: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", validate_amount(self.amount))
        object.__setattr__(self, "unit", TimeUnit.for_arithmetic(self.unit))

    @classmethod
    def of(cls, amount: object, unit: object) -> Duration:
        """Create a Duration, validating amount and unit.

        Raises:
            InvalidAmount: If amount is not a finite integer.
            InvalidUnit: If unit is not an arithmetic unit.
        """
        return cls(amount, unit)  # type: ignore[arg-type]

    @property
    def is_calendar(self) -> bool:
        """True when the unit is months or years."""
        return self.unit.is_calendar

    @property
    def fixed_millis(self) -> int | None:
        """Return the exact span in milliseconds, or None for months/years."""
        unit_millis = self.unit.to_millis()
        if unit_millis is None:
            return None
        return self.amount * unit_millis

    def __neg__(self) -> Duration:
        return Duration(-self.amount, self.unit)


__all__ = ["Duration"]
