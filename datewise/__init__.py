"""Datewise: timezone-aware date computation.

Datewise answers four kinds of request: the current time in a zone, date
arithmetic (add or subtract an amount of a unit), the difference between
now and a reference date, and timezone conversion. Instants are epoch
milliseconds; zones are fixed UTC offsets or IANA zone names.

Core Types:
    Instant: A point on the UTC timeline (epoch milliseconds)
    Duration: A signed amount of one arithmetic unit
    CalendarMoment: An instant viewed through a zone's wall clock

Units:
    TimeUnit: Arithmetic and difference units (SECONDS ... YEARS)
    Zone: Fixed offset or named IANA zone

Service:
    DateService: The four request-level operations
    Outcome: Tagged success/failure result

Exceptions:
    DatewiseError: Base exception
    InvalidDateFormat: Unparseable date/time literal
    InvalidTimezone: Unknown zone or malformed offset
    InvalidUnit: Unknown unit name
    InvalidAmount: Non-integral amount or out-of-range result

Example:
    >>> from datewise import DateService, FixedClock, parse_timestamp
    >>> service = DateService(clock=FixedClock(parse_timestamp("2025-01-08T00:00:00Z")))
    >>> service.calculate_date(1, "months", base_date="2024-01-31").value["result"]["iso"]
    '2024-02-29T00:00:00.000Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datewise.core.duration import Duration
from datewise.core.instant import Instant
from datewise.core.moment import CalendarMoment, extract_components

# Units
from datewise.units.database import TimezoneDatabase, ZoneInfoDatabase
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone, resolve_zone

# Exceptions
from datewise.errors import (
    DatewiseError,
    InvalidAmount,
    InvalidDateFormat,
    InvalidTimezone,
    InvalidUnit,
)

# Computation
from datewise.arithmetic import DifferenceResult, add, diff, subtract

# Format functions
from datewise.format import format_iso8601, format_relative, parse_iso8601, parse_timestamp

# Service
from datewise.clock import Clock, FixedClock, SystemClock
from datewise.config import Settings, configure_logging, load_settings
from datewise.outcome import Outcome
from datewise.service import DateService

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "Duration",
    "CalendarMoment",
    "extract_components",
    # Units
    "TimeUnit",
    "Zone",
    "resolve_zone",
    "TimezoneDatabase",
    "ZoneInfoDatabase",
    # Exceptions
    "DatewiseError",
    "InvalidDateFormat",
    "InvalidTimezone",
    "InvalidUnit",
    "InvalidAmount",
    # Computation
    "add",
    "subtract",
    "diff",
    "DifferenceResult",
    # Format functions
    "parse_iso8601",
    "parse_timestamp",
    "format_iso8601",
    "format_relative",
    # Service
    "Clock",
    "SystemClock",
    "FixedClock",
    "Settings",
    "load_settings",
    "configure_logging",
    "Outcome",
    "DateService",
]
