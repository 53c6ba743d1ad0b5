"""Difference between two instants.

Every unit is measured independently over the whole span rather than as
a breakdown into "1 week, 2 days, 3 hours": a 7-day span is 7 days, 168
hours and 1 week all at once.

Fixed-length units are a floor division of the elapsed milliseconds.
Months and years count whole calendar months between the two moments in
a zone, using the same clamping rule as ``add_months``: the month count is
the largest n for which ``add_months(earlier, n) <= later``. Dividing by
an average month length would drift by days over long spans.
"""

from __future__ import annotations

from dataclasses import dataclass

from datewise.arithmetic.period_ops import add_months
from datewise.core.instant import Instant
from datewise.core.moment import extract_components
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone


@dataclass(frozen=True)
class DifferenceResult:
    """Nonnegative per-unit magnitudes between two instants plus direction.

    Attributes:
        milliseconds ... years: Whole units elapsed, each measured over the
            full span.
        is_past: True when the first instant is after the second one, i.e.
            the second instant lies in the first one's past.
    """

    milliseconds: int
    seconds: int
    minutes: int
    hours: int
    days: int
    weeks: int
    months: int
    years: int
    is_past: bool

    def get(self, unit: object) -> int:
        """Return the magnitude for one unit.

        Raises:
            InvalidUnit: If unit does not name a unit.
        """
        return getattr(self, TimeUnit.parse(unit).value)

    def magnitudes(self) -> dict[str, int]:
        """Return all magnitudes keyed by unit name, smallest unit first."""
        return {unit.value: getattr(self, unit.value) for unit in TimeUnit}


def calendar_months_between(earlier: Instant, later: Instant, zone: Zone) -> int:
    """Count whole calendar months from ``earlier`` to ``later`` in a zone.

    Examples:
        >>> from datewise.format.iso8601 import parse_timestamp
        >>> a = parse_timestamp("2024-01-31T00:00:00Z")
        >>> b = parse_timestamp("2024-02-29T00:00:00Z")
        >>> calendar_months_between(a, b, Zone.utc())
        1
    """
    start = extract_components(earlier, zone)
    end = extract_components(later, zone)
    months = (end.year - start.year) * 12 + (end.month - start.month)
    # add_months(earlier, months) lands in later's month; step back if it
    # overshoots. Landing in the month before is always <= later.
    if months > 0 and add_months(earlier, zone, months) > later:
        months -= 1
    return max(months, 0)


def diff(a: Instant, b: Instant, zone: Zone | None = None) -> DifferenceResult:
    """Compute the difference between two instants.

    Args:
        a: First instant.
        b: Second instant.
        zone: Zone whose calendar months and years are counted in. Defaults
            to UTC.

    Returns:
        A DifferenceResult with ``is_past`` true when ``a`` is after ``b``.

    Examples:
        >>> from datewise.format.iso8601 import parse_timestamp
        >>> now = parse_timestamp("2025-01-08T00:00:00Z")
        >>> ref = parse_timestamp("2025-01-01T00:00:00Z")
        >>> d = diff(now, ref)
        >>> d.days, d.hours, d.weeks, d.is_past
        (7, 168, 1, True)
    """
    if zone is None:
        zone = Zone.utc()

    earlier, later = (b, a) if a > b else (a, b)
    elapsed = later.epoch_millis - earlier.epoch_millis

    fixed: dict[str, int] = {}
    for unit in TimeUnit:
        unit_millis = unit.to_millis()
        if unit_millis is not None:
            fixed[unit.value] = elapsed // unit_millis

    months = calendar_months_between(earlier, later, zone)

    return DifferenceResult(
        **fixed,
        months=months,
        years=months // 12,
        is_past=a > b,
    )


__all__ = ["DifferenceResult", "calendar_months_between", "diff"]
