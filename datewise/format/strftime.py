"""strftime-style formatting of calendar moments.

This module renders a CalendarMoment with a strftime-like pattern. Names
of weekdays and months come from a LocaleData, so the same pattern
machinery serves every supported language.

Supported Directives:
    %Y - 4-digit year (e.g., 2025)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Milliseconds (000-999)
    %j - 3-digit day of year (001-366)
    %V - 2-digit ISO week number (01-53)
    %A - Weekday name
    %a - Abbreviated weekday name
    %B - Month name
    %z - UTC offset (+0900, -0530)
    %Z - Zone name (Asia/Tokyo, UTC, +05:30)
    %% - Literal %

    A "-" flag drops zero padding (%-d, %-m, %-H) and a ":" flag
    separates the offset with a colon (%:z).

Examples:
    >>> from datewise.core.instant import Instant
    >>> from datewise.core.moment import extract_components
    >>> from datewise.units.timezone import Zone
    >>> m = extract_components(Instant(1_736_294_400_000), Zone.utc())
    >>> strftime(m, "%Y-%m-%d %H:%M:%S")
    '2025-01-08 00:00:00'
    >>> strftime(m, "%A, %B %-d")
    'Wednesday, January 8'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewise.format.locale import ENGLISH, LocaleData

if TYPE_CHECKING:
    from datewise.core.moment import CalendarMoment


def strftime(moment: CalendarMoment, fmt: str, locale: LocaleData = ENGLISH) -> str:
    """Format a CalendarMoment using a strftime-style format string.

    Args:
        moment: The calendar fields to render.
        fmt: Format string with %-directives.
        locale: Source of weekday and month names.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format contains unsupported directives.
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            flag = ""
            j = i + 1
            if fmt[j] in "-:" and j + 1 < len(fmt):
                flag = fmt[j]
                j += 1
            result.append(_format_directive(moment, fmt[j], flag, locale))
            i = j + 1
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(
    moment: CalendarMoment,
    directive: str,
    flag: str,
    locale: LocaleData,
) -> str:
    """Format a single directive character with an optional flag."""
    if directive == "%":
        return "%"

    padded: dict[str, tuple[int, int]] = {
        "Y": (moment.year, 4),
        "m": (moment.month, 2),
        "d": (moment.day, 2),
        "H": (moment.hour, 2),
        "M": (moment.minute, 2),
        "S": (moment.second, 2),
        "f": (moment.millisecond, 3),
        "j": (moment.day_of_year, 3),
        "V": (moment.week_of_year, 2),
    }
    if directive in padded:
        value, width = padded[directive]
        if flag == "-":
            return str(value)
        return f"{value:0{width}d}"

    if directive == "A":
        return locale.weekdays[moment.weekday]
    if directive == "a":
        return locale.weekdays_short[moment.weekday]
    if directive == "B":
        return locale.months[moment.month]
    if directive == "z":
        offset = moment.offset
        return offset if flag == ":" else offset.replace(":", "")
    if directive == "Z":
        return moment.zone.name

    raise ValueError(f"unsupported format directive: %{flag}{directive}")


def format_human(moment: CalendarMoment, locale: LocaleData = ENGLISH) -> str:
    """Render a moment with the locale's human-readable pattern.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> from datewise.core.moment import extract_components
        >>> from datewise.format.locale import JAPANESE
        >>> from datewise.units.timezone import Zone
        >>> m = extract_components(Instant(1_736_294_400_000), Zone.from_offset_string("+09:00"))
        >>> format_human(m)
        'Wednesday, January 8, 2025 at 09:00:00 +09:00'
        >>> format_human(m, JAPANESE)
        '2025年1月8日(水) 9:00:00 +09:00'
    """
    return strftime(moment, locale.human_pattern, locale)


__all__ = ["strftime", "format_human"]
