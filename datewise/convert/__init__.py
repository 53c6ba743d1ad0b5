"""Conversion utilities for instants.

This module provides:
    - Epoch conversions (Unix seconds and milliseconds)
    - Timezone conversion (same instant, different calendar view)

Examples:
    >>> from datewise.convert import convert, to_unix_millis
    >>> from datewise.core.instant import Instant
    >>> from datewise.units.timezone import Zone
    >>> moment = convert(Instant(0), Zone.from_offset_string("-05:00"))
    >>> moment.day, to_unix_millis(moment.instant)
    (31, 0)
"""

from __future__ import annotations

from datewise.convert.epoch import (
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)
from datewise.convert.timezone import convert

__all__: list[str] = [
    "convert",
    "from_unix_millis",
    "from_unix_seconds",
    "to_unix_millis",
    "to_unix_seconds",
]
