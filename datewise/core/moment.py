"""CalendarMoment: the calendar view of an Instant in a Zone.

A CalendarMoment is always derived from an (Instant, Zone) pair and never
constructed field by field, so its fields cannot disagree with each other.
"""

from __future__ import annotations

from dataclasses import dataclass

from datewise._internal.calendar import (
    day_of_year,
    days_in_month,
    epoch_days_to_ymd,
    iso_week,
    iso_weekday,
)
from datewise._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from datewise.core.instant import Instant
from datewise.units.timezone import Zone, format_offset


@dataclass(frozen=True)
class CalendarMoment:
    """Calendar and clock fields of an Instant as seen in a Zone.

    Week numbering follows ISO 8601 (weeks start on Monday, week 1 holds
    the year's first Thursday). ``weekday`` counts from Sunday (0=Sunday,
    6=Saturday); ``iso_weekday`` is the ISO number (1=Monday, 7=Sunday)
    it is derived from. ``quarter`` is the calendar quarter of ``month``.

    Use ``extract_components`` to build one.
    """

    instant: Instant
    zone: Zone
    offset_ms: int
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    iso_weekday: int
    weekday: int
    week_year: int
    week_of_year: int
    day_of_year: int
    quarter: int
    days_in_month: int

    @property
    def is_weekend(self) -> bool:
        """True on Saturday and Sunday."""
        return self.weekday in (0, 6)

    @property
    def offset(self) -> str:
        """The UTC offset in effect, formatted as ``+HH:MM``."""
        return format_offset(self.offset_ms)

    @property
    def millis_of_day(self) -> int:
        """Milliseconds since local midnight."""
        return (
            self.hour * MILLIS_PER_HOUR
            + self.minute * MILLIS_PER_MINUTE
            + self.second * MILLIS_PER_SECOND
            + self.millisecond
        )


def sunday_based_weekday(iso_day: int) -> int:
    """Normalize an ISO weekday (1=Monday..7=Sunday) to 0=Sunday..6=Saturday.

    Examples:
        >>> sunday_based_weekday(7)
        0
        >>> sunday_based_weekday(6)
        6
    """
    return iso_day % 7


def extract_components(instant: Instant, zone: Zone) -> CalendarMoment:
    """Decompose an Instant into calendar fields in a Zone.

    Args:
        instant: The point in time.
        zone: The zone whose wall clock is read.

    Returns:
        The CalendarMoment for the pair.

    Examples:
        >>> from datewise.units.timezone import Zone
        >>> m = extract_components(Instant(1_752_278_400_000), Zone.utc())
        >>> (m.year, m.month, m.day, m.weekday, m.is_weekend)
        (2025, 7, 12, 6, True)
    """
    offset_ms = zone.offset_ms(instant.epoch_millis)
    local_millis = instant.epoch_millis + offset_ms
    epoch_days, millis_of_day = divmod(local_millis, MILLIS_PER_DAY)
    year, month, day = epoch_days_to_ymd(epoch_days)

    hour, rest = divmod(millis_of_day, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rest, MILLIS_PER_SECOND)

    iso_day = iso_weekday(year, month, day)
    week_year, week = iso_week(year, month, day)

    return CalendarMoment(
        instant=instant,
        zone=zone,
        offset_ms=offset_ms,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
        iso_weekday=iso_day,
        weekday=sunday_based_weekday(iso_day),
        week_year=week_year,
        week_of_year=week,
        day_of_year=day_of_year(year, month, day),
        quarter=(month - 1) // 3 + 1,
        days_in_month=days_in_month(year, month),
    )


__all__ = ["CalendarMoment", "extract_components", "sunday_based_weekday"]
