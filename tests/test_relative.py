"""Tests for relative phrases and locale data.

These tests verify single-unit phrase selection, English pluralization,
Japanese phrasing, locale fallback and the human-readable rendering.
"""

from __future__ import annotations

import pytest

from datewise.arithmetic import diff
from datewise.core.moment import extract_components
from datewise.format.iso8601 import parse_timestamp
from datewise.format.locale import ENGLISH, JAPANESE, get_locale
from datewise.format.relative import format_relative
from datewise.format.strftime import format_human, strftime
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone

NOW = "2025-01-08T00:00:00Z"


def _phrase(reference: str, locale=ENGLISH) -> str:
    return format_relative(diff(parse_timestamp(NOW), parse_timestamp(reference)), locale)


# =============================================================================
# Phrase Selection
# =============================================================================


class TestFormatRelative:
    """Tests for choosing the largest nonzero unit."""

    @pytest.mark.parametrize(
        "reference,expected",
        [
            ("2025-01-01T00:00:00Z", "7 days ago"),
            ("2025-01-05T00:00:00Z", "3 days ago"),
            ("2025-01-07T00:00:00Z", "1 day ago"),
            ("2025-01-07T22:00:00Z", "2 hours ago"),
            ("2025-01-07T23:59:00Z", "1 minute ago"),
            ("2025-01-07T23:59:30Z", "30 seconds ago"),
            ("2024-12-08T00:00:00Z", "1 month ago"),
            ("2023-01-08T00:00:00Z", "2 years ago"),
            ("2025-01-10T00:00:00Z", "2 days from now"),
            ("2025-03-08T00:00:00Z", "2 months from now"),
            ("2025-01-08T00:00:00Z", "now"),
            ("2025-01-08T00:00:00.999Z", "now"),
        ],
    )
    def test_phrase(self, reference: str, expected: str) -> None:
        assert _phrase(reference) == expected

    def test_smaller_units_dropped(self) -> None:
        """One day and five hours is summarised as one day."""
        assert _phrase("2025-01-06T19:00:00Z") == "1 day ago"

    def test_seven_days_reads_in_days(self) -> None:
        """Weeks are not a phrase unit, so a whole week reads in days."""
        assert _phrase("2025-01-01T00:00:00Z") == "7 days ago"

    def test_days_until_a_month_passes(self) -> None:
        assert _phrase("2024-12-19T00:00:00Z") == "20 days ago"


class TestJapanesePhrases:
    """Tests for Japanese relative phrases."""

    def test_past(self) -> None:
        assert _phrase("2025-01-05T00:00:00Z", JAPANESE) == "3日前"

    def test_future(self) -> None:
        assert _phrase("2025-01-08T02:00:00Z", JAPANESE) == "2時間後"

    def test_now(self) -> None:
        assert _phrase(NOW, JAPANESE) == "今"

    def test_days_and_months(self) -> None:
        assert _phrase("2025-01-01T00:00:00Z", JAPANESE) == "7日前"
        assert _phrase("2025-03-08T00:00:00Z", JAPANESE) == "2ヶ月後"


# =============================================================================
# Locale Data
# =============================================================================


class TestLocaleSelection:
    """Tests for get_locale."""

    @pytest.mark.parametrize(
        "locale,language",
        [
            ("en-US", "en"),
            ("en", "en"),
            ("EN-gb", "en"),
            ("ja-JP", "ja"),
            ("ja_JP", "ja"),
            ("ja", "ja"),
        ],
    )
    def test_primary_subtag(self, locale: str, language: str) -> None:
        assert get_locale(locale).language == language

    def test_unsupported_falls_back_to_default(self) -> None:
        assert get_locale("fr-FR", default="ja-JP") is JAPANESE

    def test_unsupported_default_falls_back_to_english(self) -> None:
        assert get_locale("fr-FR", default="de-DE") is ENGLISH

    @pytest.mark.parametrize("locale", [None, "", 42, "-"])
    def test_malformed_locale(self, locale: object) -> None:
        assert get_locale(locale) is ENGLISH


class TestLocalePhrases:
    """Tests for LocaleData phrase helpers."""

    def test_english_pluralization(self) -> None:
        assert ENGLISH.unit_phrase(1, TimeUnit.DAYS) == "1 day"
        assert ENGLISH.unit_phrase(2, TimeUnit.DAYS) == "2 days"
        assert ENGLISH.unit_phrase(0, TimeUnit.DAYS) == "0 days"

    def test_english_shifted(self) -> None:
        assert ENGLISH.shifted(3, TimeUnit.DAYS) == "3 days later"
        assert ENGLISH.shifted(-1, TimeUnit.MONTHS) == "1 month ago"
        assert ENGLISH.shifted(0, TimeUnit.DAYS) == "0 days later"

    def test_japanese_shifted(self) -> None:
        assert JAPANESE.shifted(3, TimeUnit.DAYS) == "3日後"
        assert JAPANESE.shifted(-2, TimeUnit.YEARS) == "2年前"


# =============================================================================
# Human Rendering
# =============================================================================


class TestHumanFormat:
    """Tests for strftime and format_human."""

    def _moment(self, zone: Zone):
        return extract_components(parse_timestamp(NOW), zone)

    def test_english(self) -> None:
        m = self._moment(Zone.from_offset_string("+09:00"))
        assert format_human(m, ENGLISH) == "Wednesday, January 8, 2025 at 09:00:00 +09:00"

    def test_japanese(self) -> None:
        m = self._moment(Zone.from_offset_string("+09:00"))
        assert format_human(m, JAPANESE) == "2025年1月8日(水) 9:00:00 +09:00"

    def test_english_utc(self) -> None:
        m = self._moment(Zone.utc())
        assert format_human(m) == "Wednesday, January 8, 2025 at 00:00:00 +00:00"

    def test_strftime_directives(self) -> None:
        m = extract_components(parse_timestamp("2025-07-12T05:06:07.089Z"), Zone.utc())
        assert strftime(m, "%Y-%m-%d %H:%M:%S.%f") == "2025-07-12 05:06:07.089"
        assert strftime(m, "%j %V %a %A %B") == "193 28 Sat Saturday July"
        assert strftime(m, "%-m/%-d %-H %z %Z %%") == "7/12 5 +0000 UTC %"

    def test_strftime_unsupported(self) -> None:
        m = self._moment(Zone.utc())
        with pytest.raises(ValueError, match="unsupported"):
            strftime(m, "%Q")
