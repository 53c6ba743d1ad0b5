"""Tests for timezone and epoch conversion."""

from __future__ import annotations

import pytest

from datewise.convert import (
    convert,
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)
from datewise.core.instant import Instant
from datewise.errors import InvalidAmount, InvalidTimezone
from datewise.format.iso8601 import parse_timestamp
from datewise.units.database import ZoneInfoDatabase
from datewise.units.timezone import Zone


class TestConvert:
    """Tests for convert."""

    def test_instant_unchanged(self) -> None:
        t = parse_timestamp("2025-01-08T00:00:00Z")
        m = convert(t, Zone.from_offset_string("-05:00"))
        assert m.instant == t
        assert (m.day, m.hour) == (7, 19)

    def test_string_target(self) -> None:
        m = convert(Instant(0), "Asia/Tokyo")
        assert (m.year, m.month, m.day, m.hour) == (1970, 1, 1, 9)
        assert m.zone.name == "Asia/Tokyo"

    def test_string_target_with_injected_database(self, fake_db) -> None:
        summer = parse_timestamp("2025-07-15T16:00:00Z")
        m = convert(summer, "Test/Eastern", fake_db)
        assert m.hour == 12
        assert m.offset == "-04:00"

    def test_kolkata_half_hour(self) -> None:
        m = convert(parse_timestamp("2025-01-08T00:00:00Z"), "Asia/Kolkata", ZoneInfoDatabase())
        assert (m.hour, m.minute) == (5, 30)
        assert m.offset == "+05:30"

    def test_unknown_target(self) -> None:
        with pytest.raises(InvalidTimezone):
            convert(Instant(0), "Mars/Olympus_Mons")

    def test_convert_across_date_line(self) -> None:
        t = parse_timestamp("2025-01-08T11:00:00Z")
        kiritimati = convert(t, "+14:00")
        samoa = convert(t, "-11:00")
        assert kiritimati.day == 9
        assert samoa.day == 8
        assert kiritimati.instant == samoa.instant


class TestEpoch:
    """Tests for Unix epoch conversion."""

    def test_seconds_floor(self) -> None:
        assert to_unix_seconds(Instant(1_999)) == 1
        assert to_unix_seconds(Instant(-1)) == -1

    def test_millis(self) -> None:
        assert to_unix_millis(from_unix_millis(1_736_294_400_123)) == 1_736_294_400_123

    def test_from_seconds(self) -> None:
        assert from_unix_seconds(1_736_294_400) == parse_timestamp("2025-01-08T00:00:00Z")

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidAmount):
            from_unix_seconds(10**12)
