"""Core temporal types for Datewise.

This module provides:
    - Instant: Absolute point in time (epoch milliseconds)
    - Duration: Signed amount of one unit
    - CalendarMoment: Calendar fields of an Instant in a Zone
"""

from __future__ import annotations

from datewise.core.duration import Duration
from datewise.core.instant import Instant
from datewise.core.moment import CalendarMoment, extract_components

__all__: list[str] = [
    "CalendarMoment",
    "Duration",
    "Instant",
    "extract_components",
]
