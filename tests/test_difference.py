"""Tests for differences between instants.

These tests verify independent per-unit floor division, calendar-based
month and year counting, direction, and symmetry.
"""

from __future__ import annotations

import pytest

from datewise.arithmetic import add, calendar_months_between, diff
from datewise.errors import InvalidUnit
from datewise.format.iso8601 import parse_timestamp
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone

UTC = Zone.utc()


def _t(text: str):
    return parse_timestamp(text)


# =============================================================================
# Fixed Units
# =============================================================================


class TestFixedUnitDifference:
    """Tests for milliseconds through weeks."""

    def test_one_week(self) -> None:
        d = diff(_t("2025-01-08T00:00:00Z"), _t("2025-01-01T00:00:00Z"))
        assert d.milliseconds == 604_800_000
        assert d.seconds == 604_800
        assert d.minutes == 10_080
        assert d.hours == 168
        assert d.days == 7
        assert d.weeks == 1
        assert d.is_past is True

    def test_each_unit_measures_whole_span(self) -> None:
        """Units are not a breakdown: 90 minutes is 1 hour and 90 minutes."""
        d = diff(_t("2025-01-01T01:30:00Z"), _t("2025-01-01T00:00:00Z"))
        assert d.hours == 1
        assert d.minutes == 90
        assert d.seconds == 5_400

    def test_floor_division(self) -> None:
        d = diff(_t("2025-01-01T00:00:00Z"), _t("2025-01-07T23:59:59.999Z"))
        assert d.days == 6
        assert d.weeks == 0
        assert d.seconds == 7 * 86_400 - 1

    def test_zero_difference(self) -> None:
        t = _t("2025-01-08T00:00:00Z")
        d = diff(t, t)
        assert all(value == 0 for value in d.magnitudes().values())
        assert d.is_past is False

    def test_future_reference(self) -> None:
        d = diff(_t("2025-01-01T00:00:00Z"), _t("2025-01-01T02:00:00Z"))
        assert d.hours == 2
        assert d.is_past is False


# =============================================================================
# Calendar Units
# =============================================================================


class TestCalendarDifference:
    """Tests for months and years by calendar-field subtraction."""

    def test_whole_months(self) -> None:
        d = diff(_t("2025-04-15T00:00:00Z"), _t("2025-01-15T00:00:00Z"))
        assert d.months == 3
        assert d.years == 0

    def test_incomplete_month(self) -> None:
        d = diff(_t("2025-02-14T23:59:59Z"), _t("2025-01-15T00:00:00Z"))
        assert d.months == 0
        assert d.days == 30

    def test_clamped_month_end(self) -> None:
        """Jan 31 to Feb 29 is one month, matching add_months' clamp."""
        assert calendar_months_between(_t("2024-01-31T00:00:00Z"), _t("2024-02-29T00:00:00Z"), UTC) == 1
        assert calendar_months_between(_t("2024-01-31T00:00:00Z"), _t("2024-02-28T00:00:00Z"), UTC) == 0

    def test_years(self) -> None:
        d = diff(_t("2025-01-08T00:00:00Z"), _t("2000-01-08T00:00:00Z"))
        assert d.years == 25
        assert d.months == 300

    def test_year_one_month_short(self) -> None:
        d = diff(_t("2025-01-07T00:00:00Z"), _t("2024-01-08T00:00:00Z"))
        assert d.years == 0
        assert d.months == 11

    def test_leap_day_anniversary(self) -> None:
        d = diff(_t("2025-02-28T00:00:00Z"), _t("2024-02-29T00:00:00Z"))
        assert d.years == 1

    def test_no_fixed_divisor_drift(self) -> None:
        """Ten years is 120 months even though it is not 3650 days."""
        d = diff(_t("2030-03-01T00:00:00Z"), _t("2020-03-01T00:00:00Z"))
        assert d.months == 120
        assert d.years == 10
        assert d.days == 3652

    @pytest.mark.parametrize("months", [1, 2, 5, 11, 12, 13, 59])
    def test_consistent_with_add_months(self, months: int) -> None:
        start = _t("2024-01-31T12:00:00Z")
        end = add(start, UTC, months, "months")
        assert diff(end, start).months == months
        assert diff(end.plus_millis(-1), start).months == months - 1

    def test_months_in_zone(self) -> None:
        """Jan 30 in UTC is Jan 31 in Tokyo, where Feb 28 completes a month."""
        a = _t("2025-01-30T20:00:00Z")
        b = _t("2025-02-28T10:00:00Z")
        assert calendar_months_between(a, b, UTC) == 0
        tokyo = Zone.from_offset_string("+09:00")
        assert calendar_months_between(a, b, tokyo) == 1


# =============================================================================
# Symmetry and Accessors
# =============================================================================


class TestSymmetry:
    """Tests for direction and symmetry."""

    @pytest.mark.parametrize(
        "a,b",
        [
            ("2025-01-08T00:00:00Z", "2025-01-01T00:00:00Z"),
            ("2024-01-31T00:00:00Z", "2024-03-01T12:00:00Z"),
            ("1999-12-31T23:59:59.999Z", "2000-01-01T00:00:00Z"),
            ("2020-02-29T00:00:00Z", "2025-02-28T00:00:00Z"),
        ],
    )
    def test_magnitudes_symmetric(self, a: str, b: str) -> None:
        ab = diff(_t(a), _t(b))
        ba = diff(_t(b), _t(a))
        assert ab.magnitudes() == ba.magnitudes()
        assert ab.is_past is not ba.is_past

    def test_magnitudes_nonnegative(self) -> None:
        d = diff(_t("2000-01-01T00:00:00Z"), _t("2025-01-01T00:00:00Z"))
        assert all(value >= 0 for value in d.magnitudes().values())


class TestDifferenceResultAccess:
    """Tests for DifferenceResult accessors."""

    def test_get_by_name(self) -> None:
        d = diff(_t("2025-01-08T00:00:00Z"), _t("2025-01-01T00:00:00Z"))
        assert d.get("days") == 7
        assert d.get("Week") == 1
        assert d.get(TimeUnit.HOURS) == 168

    def test_get_unknown(self) -> None:
        d = diff(_t("2025-01-08T00:00:00Z"), _t("2025-01-01T00:00:00Z"))
        with pytest.raises(InvalidUnit):
            d.get("fortnights")

    def test_magnitudes_keys(self) -> None:
        d = diff(_t("2025-01-08T00:00:00Z"), _t("2025-01-01T00:00:00Z"))
        assert list(d.magnitudes()) == [
            "milliseconds", "seconds", "minutes", "hours",
            "days", "weeks", "months", "years",
        ]
