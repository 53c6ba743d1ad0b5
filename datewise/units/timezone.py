"""Zone representation and resolution.

This module provides the Zone class for representing timezones either as
fixed UTC offsets or as named IANA zones whose offset varies by date, and
``resolve_zone`` for turning a caller-supplied identifier into a Zone.
"""

from __future__ import annotations

import re
from typing import ClassVar

from datewise._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    MILLIS_PER_DAY,
    MILLIS_PER_SECOND,
)
from datewise.errors import InvalidTimezone
from datewise.units.database import TimezoneDatabase

_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2})(?::?(\d{2}))?)?$")


def format_offset(offset_ms: int) -> str:
    """Render an offset in milliseconds as ``+HH:MM`` (``+HH:MM:SS`` when
    the offset has a seconds part, as historical local mean times do).

    Examples:
        >>> format_offset(32_400_000)
        '+09:00'
        >>> format_offset(-19_800_000)
        '-05:30'
    """
    sign = "+" if offset_ms >= 0 else "-"
    total_seconds = abs(offset_ms) // MILLIS_PER_SECOND
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


class Zone:
    """A timezone: a fixed UTC offset or a named zone with varying offset.

    Named zones delegate offset lookups to a TimezoneDatabase, so the same
    Zone answers differently for instants on either side of a DST change.
    Fixed zones always answer with the same offset.

    Attributes:
        name: The zone identifier ("Asia/Tokyo", "UTC", "+05:30").
        is_fixed: True for fixed-offset zones.

    Examples:
        >>> Zone.utc().offset_ms(0)
        0

        >>> Zone.from_offset_string("+05:30").name
        '+05:30'

        >>> from datewise.units.database import ZoneInfoDatabase
        >>> tokyo = Zone.named("Asia/Tokyo", ZoneInfoDatabase())
        >>> tokyo.offset_ms(0)
        32400000
    """

    __slots__ = ("_name", "_fixed_offset_ms", "_database")

    _utc_instance: ClassVar[Zone | None] = None

    def __init__(
        self,
        name: str,
        *,
        fixed_offset_ms: int | None = None,
        database: TimezoneDatabase | None = None,
    ) -> None:
        """Create a Zone. Prefer the ``utc``, ``fixed``, ``from_offset_string``
        and ``named`` factories, which validate their input.

        Exactly one of fixed_offset_ms and database must be given.
        """
        if (fixed_offset_ms is None) == (database is None):
            raise ValueError("exactly one of fixed_offset_ms and database is required")
        self._name: str = name
        self._fixed_offset_ms: int | None = fixed_offset_ms
        self._database: TimezoneDatabase | None = database

    @classmethod
    def utc(cls) -> Zone:
        """Return the UTC zone (a shared instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = cls("UTC", fixed_offset_ms=0)
        return cls._utc_instance

    @classmethod
    def fixed(cls, offset_seconds: int) -> Zone:
        """Create a fixed-offset zone.

        Raises:
            InvalidTimezone: If the offset exceeds 14 hours either way.
        """
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise InvalidTimezone(
                f"offset {offset_seconds}s is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        if offset_seconds == 0:
            return cls.utc()
        offset_ms = offset_seconds * MILLIS_PER_SECOND
        return cls(format_offset(offset_ms), fixed_offset_ms=offset_ms)

    @classmethod
    def from_offset_string(cls, s: str) -> Zone:
        """Parse a fixed-offset identifier.

        Supported formats:
            - "Z", "z", "UTC", "GMT": UTC
            - "+HH:MM", "-HH:MM", "+HHMM", "+HH" (optionally with seconds)
            - any of the signed forms prefixed with "UTC" or "GMT"

        Raises:
            InvalidTimezone: If the string cannot be parsed or is out of range.

        Examples:
            >>> Zone.from_offset_string("Z").is_utc
            True
            >>> Zone.from_offset_string("-0500").offset_ms(0)
            -18000000
        """
        s = s.strip()
        if s.upper() in ("Z", "UTC", "GMT"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise InvalidTimezone(f"Cannot parse offset: {s!r}")

        sign_str, hours_str, minutes_str, seconds_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        seconds = int(seconds_str) if seconds_str else 0
        if minutes > 59 or seconds > 59:
            raise InvalidTimezone(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls.fixed(sign * (hours * 3600 + minutes * 60 + seconds))

    @classmethod
    def named(cls, zone_id: str, database: TimezoneDatabase) -> Zone:
        """Create a named zone, checking that the database knows it.

        Raises:
            InvalidTimezone: If the database does not recognise zone_id.
        """
        database.offset_for_instant(zone_id, 0)
        return cls(zone_id, database=database)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_fixed(self) -> bool:
        return self._fixed_offset_ms is not None

    @property
    def is_utc(self) -> bool:
        return self._fixed_offset_ms == 0

    def offset_ms(self, epoch_millis: int) -> int:
        """Return the UTC offset in milliseconds in effect at an instant."""
        if self._database is None:
            return self._fixed_offset_ms or 0
        return self._database.offset_for_instant(self._name, epoch_millis)

    def local_to_epoch_millis(self, local_millis: int) -> int:
        """Resolve a wall-clock reading in this zone to epoch milliseconds.

        ``local_millis`` is the local reading expressed as if it were UTC
        (milliseconds since 1970-01-01T00:00 local). Ambiguous readings
        (clocks turned back) resolve to the earlier instant. Readings that
        fall in a gap (clocks turned forward) are shifted forward by the
        length of the gap, so 02:30 on a spring-forward night in New York
        becomes 03:30 EDT.

        Examples:
            >>> Zone.from_offset_string("+09:00").local_to_epoch_millis(32_400_000)
            0
        """
        if self._fixed_offset_ms is not None:
            return local_millis - self._fixed_offset_ms

        # Offsets in effect a day either side bracket any single transition.
        before = self.offset_ms(local_millis - MILLIS_PER_DAY)
        after = self.offset_ms(local_millis + MILLIS_PER_DAY)

        candidates = sorted(
            local_millis - offset
            for offset in {before, after}
            if self.offset_ms(local_millis - offset) == offset
        )
        if candidates:
            return candidates[0]

        # Gap: interpret the reading with the pre-transition offset.
        return local_millis - before

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zone):
            return NotImplemented
        return (
            self._name == other._name
            and self._fixed_offset_ms == other._fixed_offset_ms
        )

    def __hash__(self) -> int:
        return hash((self._name, self._fixed_offset_ms))

    def __repr__(self) -> str:
        return f"Zone({self._name!r})"

    def __str__(self) -> str:
        return self._name


def resolve_zone(identifier: object, database: TimezoneDatabase) -> Zone:
    """Validate and normalize a zone identifier.

    Offset identifiers ("UTC", "Z", "+09:00") become fixed zones; anything
    else is looked up in the database as an IANA name.

    Args:
        identifier: The caller-supplied identifier.
        database: Where named zones are looked up.

    Returns:
        The resolved Zone.

    Raises:
        InvalidTimezone: If the identifier is empty, not a string, or unknown.

    Examples:
        >>> from datewise.units.database import ZoneInfoDatabase
        >>> resolve_zone(" Asia/Tokyo ", ZoneInfoDatabase()).name
        'Asia/Tokyo'
        >>> resolve_zone("+09:00", ZoneInfoDatabase()).is_fixed
        True
    """
    if not isinstance(identifier, str):
        raise InvalidTimezone(
            f"timezone must be a string, got {type(identifier).__name__}"
        )
    name = identifier.strip()
    if not name:
        raise InvalidTimezone("timezone must not be empty")

    if name.upper() in ("Z", "UTC", "GMT") or name[0] in "+-" or _OFFSET_PATTERN.match(name):
        return Zone.from_offset_string(name)
    return Zone.named(name, database)


__all__ = ["Zone", "resolve_zone", "format_offset"]
