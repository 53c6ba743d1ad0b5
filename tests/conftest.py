"""Pytest configuration and fixtures for Datewise tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datewise can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datewise.clock import FixedClock  # noqa: E402
from datewise.core.instant import Instant  # noqa: E402
from datewise.errors import InvalidTimezone  # noqa: E402
from datewise.format.iso8601 import parse_timestamp  # noqa: E402

HOUR_MS = 3_600_000


class FakeTimezoneDatabase:
    """Deterministic timezone database for tests.

    Each zone is a list of (start_epoch_millis, offset_ms) transitions in
    ascending order; the first entry applies from the beginning of time.

    Zones:
        Test/Tokyo: always +09:00.
        Test/Eastern: New York's 2025 rules (-05:00, -04:00 from
            2025-03-09T07:00Z, -05:00 again from 2025-11-02T06:00Z).
    """

    def __init__(self) -> None:
        spring = parse_timestamp("2025-03-09T07:00:00Z").epoch_millis
        fall = parse_timestamp("2025-11-02T06:00:00Z").epoch_millis
        self.zones: dict[str, list[tuple[int, int]]] = {
            "Test/Tokyo": [(-(2**62), 9 * HOUR_MS)],
            "Test/Eastern": [
                (-(2**62), -5 * HOUR_MS),
                (spring, -4 * HOUR_MS),
                (fall, -5 * HOUR_MS),
            ],
        }
        self.lookups = 0

    def offset_for_instant(self, zone_id: str, epoch_millis: int) -> int:
        self.lookups += 1
        if zone_id not in self.zones:
            raise InvalidTimezone(f"Invalid timezone: {zone_id}")
        offset = 0
        for start, value in self.zones[zone_id]:
            if epoch_millis >= start:
                offset = value
        return offset


class CountingClock(FixedClock):
    """FixedClock that records how many times it was read."""

    def __init__(self, instant: Instant) -> None:
        super().__init__(instant)
        self.reads = 0

    def now(self) -> Instant:
        self.reads += 1
        return super().now()


@pytest.fixture
def fake_db() -> FakeTimezoneDatabase:
    return FakeTimezoneDatabase()


@pytest.fixture
def clock() -> CountingClock:
    """Clock fixed at 2025-01-08T00:00:00Z (a Wednesday)."""
    return CountingClock(parse_timestamp("2025-01-08T00:00:00Z"))
