"""Single-unit relative time phrases.

A DifferenceResult is summarised by its largest nonzero unit, in order
years > months > days > hours > minutes > seconds, giving phrases such as
"7 days ago" or "2 hours from now". Weeks are not used, so 20 days reads
"20 days ago" until a calendar month has passed. Smaller units are
dropped, so 1 day and 5 hours reads "1 day ago". A span under one second
reads "now".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewise.format.locale import ENGLISH, LocaleData
from datewise.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from datewise.arithmetic.difference import DifferenceResult

RELATIVE_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.YEARS,
    TimeUnit.MONTHS,
    TimeUnit.DAYS,
    TimeUnit.HOURS,
    TimeUnit.MINUTES,
    TimeUnit.SECONDS,
)


def format_relative(
    result: DifferenceResult,
    locale: LocaleData = ENGLISH,
) -> str:
    """Reduce a DifferenceResult to one human phrase.

    Args:
        result: The difference to summarise. ``is_past`` selects "ago"
            versus "from now".
        locale: Language of the phrase.

    Returns:
        A phrase like "7 days ago", "1 month from now" or "now".

    Examples:
        >>> from datewise.arithmetic.difference import diff
        >>> from datewise.core.instant import Instant
        >>> format_relative(diff(Instant(604_800_000), Instant(0)))
        '7 days ago'
        >>> format_relative(diff(Instant(0), Instant(7_200_000)))
        '2 hours from now'
        >>> format_relative(diff(Instant(0), Instant(999)))
        'now'
    """
    for unit in RELATIVE_UNITS:
        magnitude = getattr(result, unit.value)
        if magnitude > 0:
            return locale.relative(magnitude, unit, past=result.is_past)
    return locale.now


__all__ = ["RELATIVE_UNITS", "format_relative"]
