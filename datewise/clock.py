"""Injectable time source.

Nothing in the computation code reads the system clock. The service reads
"now" from a Clock exactly once per request and passes that Instant to
every computation, so all fields of one response agree on the time.
"""

from __future__ import annotations

import time
from typing import Protocol

from datewise.core.instant import Instant


class Clock(Protocol):
    """Source of the current Instant."""

    def now(self) -> Instant:
        """Return the current Instant."""
        ...  # pragma: no cover


class SystemClock:
    """Production clock: the system's real time."""

    def now(self) -> Instant:
        return Instant(time.time_ns() // 1_000_000)


class FixedClock:
    """Test clock: returns a fixed Instant until advanced.

    Examples:
        >>> clock = FixedClock(Instant(0))
        >>> clock.advance(1_500)
        >>> clock.now().epoch_millis
        1500
    """

    def __init__(self, instant: Instant) -> None:
        self._instant = instant

    def now(self) -> Instant:
        return self._instant

    def advance(self, millis: int) -> None:
        """Move the fixed time forward (or back, if negative)."""
        self._instant = self._instant.plus_millis(millis)


__all__ = ["Clock", "SystemClock", "FixedClock"]
