"""Locale data for human-readable output.

Only two languages are supported, English and Japanese. A locale string
("en-US", "ja_JP", "ja") selects one by its primary subtag; anything else
falls back to a default language and never fails.
"""

from __future__ import annotations

from dataclasses import dataclass

from datewise.units.timeunit import TimeUnit


@dataclass(frozen=True)
class LocaleData:
    """Words and patterns for one language.

    Attributes:
        language: Primary language subtag ("en", "ja").
        weekdays: Weekday names indexed 0=Sunday..6=Saturday.
        weekdays_short: Abbreviated weekday names, same indexing.
        months: Month names indexed 1..12 (index 0 unused).
        human_pattern: strftime pattern for the "human" rendering.
        now: The word for a zero difference.
    """

    language: str
    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    months: tuple[str, ...]
    human_pattern: str
    now: str

    def unit_phrase(self, amount: int, unit: TimeUnit) -> str:
        """Render "<amount> <unit>" ("3 days", "1 day", "3日")."""
        if self.language == "ja":
            return f"{amount}{_JA_UNITS[unit]}"
        name = unit.singular if amount == 1 else unit.value
        return f"{amount} {name}"

    def relative(self, amount: int, unit: TimeUnit, *, past: bool) -> str:
        """Render a relative phrase ("3 days ago", "3 days from now")."""
        phrase = self.unit_phrase(amount, unit)
        if self.language == "ja":
            return f"{phrase}{'前' if past else '後'}"
        return f"{phrase} {'ago' if past else 'from now'}"

    def shifted(self, amount: int, unit: TimeUnit) -> str:
        """Describe a signed shift ("3 days later", "2 weeks ago")."""
        phrase = self.unit_phrase(abs(amount), unit)
        if self.language == "ja":
            return f"{phrase}{'前' if amount < 0 else '後'}"
        return f"{phrase} {'ago' if amount < 0 else 'later'}"


_JA_UNITS: dict[TimeUnit, str] = {
    TimeUnit.MILLISECONDS: "ミリ秒",
    TimeUnit.SECONDS: "秒",
    TimeUnit.MINUTES: "分",
    TimeUnit.HOURS: "時間",
    TimeUnit.DAYS: "日",
    TimeUnit.WEEKS: "週間",
    TimeUnit.MONTHS: "ヶ月",
    TimeUnit.YEARS: "年",
}

ENGLISH = LocaleData(
    language="en",
    weekdays=(
        "Sunday", "Monday", "Tuesday", "Wednesday",
        "Thursday", "Friday", "Saturday",
    ),
    weekdays_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    months=(
        "", "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    human_pattern="%A, %B %-d, %Y at %H:%M:%S %:z",
    now="now",
)

JAPANESE = LocaleData(
    language="ja",
    weekdays=("日曜日", "月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日"),
    weekdays_short=("日", "月", "火", "水", "木", "金", "土"),
    months=("",) + tuple(f"{m}月" for m in range(1, 13)),
    human_pattern="%Y年%-m月%-d日(%a) %-H:%M:%S %:z",
    now="今",
)

_LOCALES: dict[str, LocaleData] = {
    "en": ENGLISH,
    "ja": JAPANESE,
}


def get_locale(locale: object, default: str = "en") -> LocaleData:
    """Select locale data by the primary subtag of a locale string.

    Args:
        locale: Locale string such as "en-US" or "ja-JP". None, non-strings
            and unsupported languages select ``default``.
        default: Locale string used when ``locale`` is unusable; English
            if that is unusable too.

    Examples:
        >>> get_locale("ja-JP").language
        'ja'
        >>> get_locale("fr-FR").language
        'en'
        >>> get_locale(None, default="ja-JP").language
        'ja'
    """
    for candidate in (locale, default):
        if isinstance(candidate, str):
            language = candidate.strip().replace("_", "-").split("-")[0].lower()
            if language in _LOCALES:
                return _LOCALES[language]
    return ENGLISH


__all__ = ["LocaleData", "ENGLISH", "JAPANESE", "get_locale"]
