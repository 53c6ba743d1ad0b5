"""Calendar (month/year) arithmetic.

Months and years have no fixed length, so they are added to the calendar
fields of a moment in its zone and the result is resolved back to an
Instant.

Clamping behavior:
    When the shifted date does not exist (e.g., Jan 31 + 1 month), the day
    is clamped to the last valid day of the target month. The time of day
    is kept. Because of clamping, adding and then subtracting the same
    number of months does not always return the starting date:

    2024-01-31 + 1 month -> 2024-02-29  # leap year
    2023-01-31 + 1 month -> 2023-02-28
    2024-03-31 + 1 month -> 2024-04-30
    2024-02-29 + 1 year  -> 2025-02-28
    2024-01-31 + 1 month - 1 month -> 2024-01-29
"""

from __future__ import annotations

from datewise._internal.calendar import days_in_month, ymd_to_epoch_days
from datewise._internal.constants import MAX_YEAR, MILLIS_PER_DAY, MIN_YEAR
from datewise.core.instant import Instant
from datewise.core.moment import extract_components
from datewise.errors import InvalidAmount
from datewise.units.timezone import Zone


def shift_year_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move a (year, month) pair by a signed number of months.

    Examples:
        >>> shift_year_month(2024, 11, 3)
        (2025, 2)
        >>> shift_year_month(2024, 1, -1)
        (2023, 12)
    """
    total_months = year * 12 + (month - 1) + months
    return total_months // 12, total_months % 12 + 1


def add_months(instant: Instant, zone: Zone, months: int) -> Instant:
    """Add a signed number of calendar months to an Instant in a Zone.

    The wall-clock time is preserved and the day is clamped to the target
    month's length. The new wall-clock reading is resolved in the zone, so
    the UTC offset of the result may differ from the start's across DST.

    Args:
        instant: The starting point.
        zone: The zone whose calendar is used.
        months: Signed number of months.

    Returns:
        The shifted Instant.

    Raises:
        InvalidAmount: If the result falls outside years 1-9999.

    Examples:
        >>> from datewise.format.iso8601 import parse_timestamp, format_iso8601
        >>> t = parse_timestamp("2024-01-31T00:00:00Z")
        >>> format_iso8601(add_months(t, Zone.utc(), 1), Zone.utc())
        '2024-02-29T00:00:00.000Z'
    """
    m = extract_components(instant, zone)
    year, month = shift_year_month(m.year, m.month, months)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidAmount(
            f"result year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}"
        )

    day = min(m.day, days_in_month(year, month))
    local_millis = ymd_to_epoch_days(year, month, day) * MILLIS_PER_DAY + m.millis_of_day
    return Instant(zone.local_to_epoch_millis(local_millis))


def add_years(instant: Instant, zone: Zone, years: int) -> Instant:
    """Add a signed number of calendar years (Feb 29 clamps to Feb 28).

    Raises:
        InvalidAmount: If the result falls outside years 1-9999.
    """
    return add_months(instant, zone, years * 12)


__all__ = ["shift_year_month", "add_months", "add_years"]
