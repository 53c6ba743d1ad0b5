"""Adding durations to instants.

Fixed-length units are added as an exact millisecond offset, so the
result is unaffected by DST transitions in the zone: adding 24 hours and
adding 1 day are the same thing. Months and years go through the calendar
(see ``datewise.arithmetic.period_ops``).
"""

from __future__ import annotations

from datewise.arithmetic.period_ops import add_months, add_years
from datewise.core.duration import Duration
from datewise.core.instant import Instant
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone


def add(instant: Instant, zone: Zone, amount: object, unit: object) -> Instant:
    """Add a signed amount of a unit to an Instant.

    Args:
        instant: The starting point.
        zone: Zone whose calendar months/years are counted in. Ignored for
            fixed-length units.
        amount: Signed integer amount.
        unit: One of "seconds", "minutes", "hours", "days", "weeks",
            "months", "years" (or a TimeUnit).

    Returns:
        The shifted Instant.

    Raises:
        InvalidAmount: If amount is not a finite integer, or the result
            falls outside years 1-9999.
        InvalidUnit: If unit is not an arithmetic unit.

    Examples:
        >>> from datewise.format.iso8601 import parse_timestamp, format_iso8601
        >>> t = parse_timestamp("2024-01-31T00:00:00Z")
        >>> format_iso8601(add(t, Zone.utc(), 1, "years"), Zone.utc())
        '2025-01-31T00:00:00.000Z'
        >>> add(add(t, Zone.utc(), 5, "hours"), Zone.utc(), -5, "hours") == t
        True
    """
    return add_duration(instant, zone, Duration.of(amount, unit))


def add_duration(instant: Instant, zone: Zone, duration: Duration) -> Instant:
    """Add a validated Duration to an Instant. See ``add``."""
    fixed = duration.fixed_millis
    if fixed is not None:
        return instant.plus_millis(fixed)

    # only months and years have no fixed length
    if duration.unit is TimeUnit.MONTHS:
        return add_months(instant, zone, duration.amount)
    return add_years(instant, zone, duration.amount)


def subtract(instant: Instant, zone: Zone, amount: object, unit: object) -> Instant:
    """Subtract a signed amount of a unit from an Instant.

    Equivalent to adding the negated amount.
    """
    return add_duration(instant, zone, -Duration.of(amount, unit))


__all__ = ["add", "add_duration", "subtract"]
