"""Calendar utilities for Datewise.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers and ISO week
numbering.

Ordinal 1 = 0001-01-01 (a Monday). Epoch days count from 1970-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_ORDINAL


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a calendar date.

    Examples:
        >>> day_of_year(2024, 1, 1)
        1
        >>> day_of_year(2024, 12, 31)
        366
    """
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + day_of_year(year, month, day)


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01). Must be
            positive.

    Returns:
        Tuple of (year, month, day).
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 of a leap year closing a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_epoch_days(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01."""
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def epoch_days_to_ymd(epoch_days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(epoch_days + UNIX_EPOCH_ORDINAL)


def iso_weekday(year: int, month: int, day: int) -> int:
    """Return the ISO weekday (1=Monday, 7=Sunday).

    Examples:
        >>> iso_weekday(2025, 7, 12)  # Saturday
        6
        >>> iso_weekday(2025, 7, 13)  # Sunday
        7
    """
    # Ordinal 1 (0001-01-01) was a Monday
    return (ymd_to_ordinal(year, month, day) - 1) % 7 + 1


def iso_weeks_in_year(year: int) -> int:
    """Return 53 for ISO long years, 52 otherwise.

    A year is long when January 1 is a Thursday, or when it is a leap
    year starting on a Wednesday.
    """
    jan1 = iso_weekday(year, 1, 1)
    if jan1 == 4 or (jan1 == 3 and is_leap_year(year)):
        return 53
    return 52


def iso_week(year: int, month: int, day: int) -> tuple[int, int]:
    """Return the ISO 8601 (week_year, week_number) for a date.

    Weeks start on Monday and week 1 is the week containing the year's
    first Thursday, so the first days of January may belong to the last
    week of the previous year and the last days of December to week 1 of
    the next.

    Examples:
        >>> iso_week(2025, 1, 1)
        (2025, 1)
        >>> iso_week(2021, 1, 1)  # Friday, belongs to 2020-W53
        (2020, 53)
        >>> iso_week(2024, 12, 30)  # Monday of 2025-W01
        (2025, 1)
    """
    week = (day_of_year(year, month, day) - iso_weekday(year, month, day) + 10) // 7
    if week < 1:
        return (year - 1, iso_weeks_in_year(year - 1))
    if week > iso_weeks_in_year(year):
        return (year + 1, 1)
    return (year, week)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_days",
    "epoch_days_to_ymd",
    "iso_weekday",
    "iso_weeks_in_year",
    "iso_week",
]
