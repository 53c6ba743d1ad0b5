"""Temporal units and zones.

This module provides:
    - TimeUnit: Duration and difference units (SECONDS, DAYS, MONTHS, ...)
    - Zone: Fixed-offset or named IANA timezone
    - resolve_zone: Validate and normalize a zone identifier
    - TimezoneDatabase / ZoneInfoDatabase: Offset lookup capability
"""

from __future__ import annotations

from datewise.units.database import TimezoneDatabase, ZoneInfoDatabase
from datewise.units.timeunit import ARITHMETIC_UNITS, TimeUnit
from datewise.units.timezone import Zone, format_offset, resolve_zone

__all__: list[str] = [
    "ARITHMETIC_UNITS",
    "TimeUnit",
    "TimezoneDatabase",
    "ZoneInfoDatabase",
    "Zone",
    "format_offset",
    "resolve_zone",
]
