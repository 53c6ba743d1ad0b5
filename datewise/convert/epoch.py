"""Epoch conversion utilities for instants.

Instants are exposed to machine consumers both as Unix seconds and as
Unix milliseconds. The Unix epoch is 1970-01-01 00:00:00 UTC.

Functions:
    to_unix_seconds: Whole seconds since the epoch (floored).
    from_unix_seconds: Instant from whole seconds.
    to_unix_millis: Milliseconds since the epoch.
    from_unix_millis: Instant from milliseconds.

Examples:
    >>> from datewise.convert import to_unix_seconds, from_unix_millis
    >>> to_unix_seconds(from_unix_millis(1_736_294_400_999))
    1736294400

    >>> to_unix_seconds(from_unix_millis(-1))  # floors towards the past
    -1
"""

from __future__ import annotations

from datewise.core.instant import Instant


def to_unix_seconds(instant: Instant) -> int:
    """Convert an Instant to whole Unix seconds, rounding towards the past."""
    return instant.epoch_seconds


def from_unix_seconds(seconds: int) -> Instant:
    """Create an Instant from Unix seconds.

    Raises:
        InvalidAmount: If the result falls outside years 1-9999.
    """
    return Instant.from_epoch_seconds(seconds)


def to_unix_millis(instant: Instant) -> int:
    """Convert an Instant to Unix milliseconds."""
    return instant.epoch_millis


def from_unix_millis(millis: int) -> Instant:
    """Create an Instant from Unix milliseconds.

    Raises:
        InvalidAmount: If the result falls outside years 1-9999.
    """
    return Instant(millis)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
