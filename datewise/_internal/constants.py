"""Internal constants for Datewise.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000
MILLIS_PER_WEEK: int = 7 * MILLIS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Year limits (years 1-9999 of the proleptic Gregorian calendar)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 where 0001-01-01 is ordinal 1
UNIX_EPOCH_ORDINAL: int = 719_163

# Instant limits in epoch milliseconds
MIN_EPOCH_MILLIS: int = (1 - UNIX_EPOCH_ORDINAL) * MILLIS_PER_DAY  # 0001-01-01T00:00Z
MAX_EPOCH_MILLIS: int = (3_652_059 - UNIX_EPOCH_ORDINAL + 1) * MILLIS_PER_DAY - 1  # 9999-12-31T23:59:59.999Z

# Fixed offsets are limited to +/- 14 hours (Pacific/Kiritimati is UTC+14)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "MIN_EPOCH_MILLIS",
    "MAX_EPOCH_MILLIS",
    "MAX_UTC_OFFSET_SECONDS",
]
