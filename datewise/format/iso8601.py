"""ISO 8601 parsing and formatting.

This module converts date/time literals to Instants and Instants back to
ISO 8601 strings.

Functions:
    parse_iso8601: Parse a literal into a ParsedTimestamp.
    parse_timestamp: Parse a literal into an Instant.
    format_iso8601: Format an Instant as seen in a Zone.

Accepted forms:
    - YYYY-MM-DD (midnight local time)
    - YYYY-MM-DDTHH:MM
    - YYYY-MM-DDTHH:MM:SS
    - YYYY-MM-DDTHH:MM:SS.f (1-9 fractional digits, truncated to millis)
    - any date-time followed by Z, +HH:MM, +HHMM or +HH
    - any of the above followed by a bracketed zone, e.g. [Asia/Tokyo]

The date/time separator may be "T", "t" or a space, and "," is accepted as
the decimal mark.

A literal with an explicit offset is an absolute instant and the fallback
zone plays no part. Without an offset the clock reading is local time in
the bracketed zone if there is one, otherwise in the fallback zone.

Examples:
    >>> from datewise.units.timezone import Zone
    >>> parse_timestamp("2025-01-08T00:00:00Z").epoch_millis
    1736294400000

    >>> parse_timestamp("2025-01-08T09:00:00", Zone.from_offset_string("+09:00")).epoch_millis
    1736294400000

    >>> format_iso8601(parse_timestamp("2025-01-08T09:00:00+09:00"), Zone.utc())
    '2025-01-08T00:00:00.000Z'
"""

from __future__ import annotations

import re
from typing import NamedTuple

from datewise._internal.calendar import days_in_month, ymd_to_epoch_days
from datewise._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_YEAR,
)
from datewise.core.instant import Instant
from datewise.core.moment import extract_components
from datewise.errors import InvalidAmount, InvalidDateFormat, InvalidTimezone
from datewise.units.database import TimezoneDatabase, ZoneInfoDatabase
from datewise.units.timezone import Zone, resolve_zone

_ISO_PATTERN = re.compile(
    r"""
    ^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        [Tt ]
        (?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?
        (?P<offset>[Zz]|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)?
    )?
    (?:\[(?P<zone>[^\[\]]+)\])?
    $
    """,
    re.VERBOSE,
)


class ParsedTimestamp(NamedTuple):
    """Result of parsing a literal.

    Attributes:
        instant: The absolute point in time.
        zone: The zone the literal was expressed in: its own offset, its
            bracketed zone, or the fallback zone.
        has_offset: True when the literal carried an explicit offset.
    """

    instant: Instant
    zone: Zone
    has_offset: bool


def parse_iso8601(
    s: str,
    fallback: Zone | None = None,
    *,
    database: TimezoneDatabase | None = None,
) -> ParsedTimestamp:
    """Parse an ISO 8601 literal.

    Args:
        s: The literal to parse.
        fallback: Zone whose wall clock an offset-less literal is read in.
            Defaults to UTC.
        database: Where a bracketed zone name is looked up. Defaults to
            ZoneInfoDatabase.

    Returns:
        A ParsedTimestamp.

    Raises:
        InvalidDateFormat: If the literal does not match the grammar or a
            field is out of range.
        InvalidTimezone: If a bracketed zone is not recognised.
    """
    if not isinstance(s, str):
        raise InvalidDateFormat(f"date must be a string, got {type(s).__name__}")

    text = s.strip()
    match = _ISO_PATTERN.match(text)
    if not match:
        raise InvalidDateFormat(
            f"Invalid date format: {s!r}. Expected ISO 8601, e.g. "
            "2025-01-08, 2025-01-08T09:30:00 or 2025-01-08T09:30:00+09:00"
        )

    year = int(match.group("year"))
    month = int(match.group("month"))
    day = int(match.group("day"))
    hour = int(match.group("hour") or 0)
    minute = int(match.group("minute") or 0)
    second = int(match.group("second") or 0)
    fraction = match.group("fraction") or ""
    millisecond = int(fraction[:3].ljust(3, "0"))

    if year < MIN_YEAR:
        raise InvalidDateFormat(f"year must be at least {MIN_YEAR}, got {year}")
    if month < 1 or month > 12:
        raise InvalidDateFormat(f"month must be 1-12, got {month}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateFormat(
            f"day must be 1-{max_day} for {year}-{month:02d}, got {day}"
        )
    if hour > 23:
        raise InvalidDateFormat(f"hour must be 0-23, got {hour}")
    if minute > 59:
        raise InvalidDateFormat(f"minute must be 0-59, got {minute}")
    if second > 59:
        raise InvalidDateFormat(f"second must be 0-59, got {second}")

    local_millis = (
        ymd_to_epoch_days(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )

    bracketed: Zone | None = None
    zone_name = match.group("zone")
    if zone_name is not None:
        if database is None:
            database = ZoneInfoDatabase()
        bracketed = resolve_zone(zone_name, database)

    offset_text = match.group("offset")
    if offset_text is not None:
        try:
            offset_zone = Zone.from_offset_string(offset_text)
        except InvalidTimezone as e:
            raise InvalidDateFormat(f"Invalid offset in {s!r}: {e}") from None
        epoch_millis = offset_zone.local_to_epoch_millis(local_millis)
        zone = bracketed or offset_zone
    else:
        zone = bracketed or fallback or Zone.utc()
        epoch_millis = zone.local_to_epoch_millis(local_millis)

    try:
        instant = Instant(epoch_millis)
    except InvalidAmount:
        raise InvalidDateFormat(f"date is outside the supported range: {s!r}") from None

    return ParsedTimestamp(instant, zone, offset_text is not None)


def parse_timestamp(
    s: str,
    fallback: Zone | None = None,
    *,
    database: TimezoneDatabase | None = None,
) -> Instant:
    """Parse an ISO 8601 literal into an Instant.

    See ``parse_iso8601`` for the accepted grammar and error behaviour.
    """
    return parse_iso8601(s, fallback, database=database).instant


def format_iso8601(instant: Instant, zone: Zone) -> str:
    """Format an Instant as ISO 8601 with milliseconds and the zone's offset.

    A zero offset is written as "Z".

    Examples:
        >>> from datewise.units.timezone import Zone
        >>> format_iso8601(Instant(0), Zone.from_offset_string("+09:00"))
        '1970-01-01T09:00:00.000+09:00'
    """
    m = extract_components(instant, zone)
    suffix = "Z" if m.offset_ms == 0 else m.offset
    return (
        f"{m.year:04d}-{m.month:02d}-{m.day:02d}"
        f"T{m.hour:02d}:{m.minute:02d}:{m.second:02d}.{m.millisecond:03d}"
        f"{suffix}"
    )


__all__ = ["ParsedTimestamp", "parse_iso8601", "parse_timestamp", "format_iso8601"]
