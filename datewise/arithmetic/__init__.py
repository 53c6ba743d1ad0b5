"""Arithmetic operations for instants.

This module provides:
    - add / subtract: Shift an Instant by a signed amount of a unit
    - add_months / add_years: Calendar shifts with end-of-month clamping
    - diff: Per-unit magnitudes and direction between two instants

Examples:
    >>> from datewise.arithmetic import add, diff
    >>> from datewise.core.instant import Instant
    >>> from datewise.units.timezone import Zone
    >>> t = Instant(0)
    >>> diff(add(t, Zone.utc(), 3, "days"), t).days
    3
"""

from __future__ import annotations

from datewise.arithmetic.difference import (
    DifferenceResult,
    calendar_months_between,
    diff,
)
from datewise.arithmetic.ops import add, add_duration, subtract
from datewise.arithmetic.period_ops import add_months, add_years

__all__: list[str] = [
    "DifferenceResult",
    "add",
    "add_duration",
    "add_months",
    "add_years",
    "calendar_months_between",
    "diff",
    "subtract",
]
