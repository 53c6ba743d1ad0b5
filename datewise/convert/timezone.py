"""Timezone conversion.

Converting an Instant to another zone never changes the point in time;
only the calendar view of it changes.
"""

from __future__ import annotations

from datewise.core.instant import Instant
from datewise.core.moment import CalendarMoment, extract_components
from datewise.units.database import TimezoneDatabase, ZoneInfoDatabase
from datewise.units.timezone import Zone, resolve_zone


def convert(
    instant: Instant,
    target: Zone | str,
    database: TimezoneDatabase | None = None,
) -> CalendarMoment:
    """Project an Instant into a target zone.

    Args:
        instant: The point in time.
        target: A Zone, or an identifier resolved through ``database``.
        database: Where an identifier is looked up. Defaults to
            ZoneInfoDatabase.

    Returns:
        The CalendarMoment of the instant in the target zone. Its
        ``instant`` is the input unchanged.

    Raises:
        InvalidTimezone: If target is an unrecognised identifier.

    Examples:
        >>> from datewise.units.database import ZoneInfoDatabase
        >>> m = convert(Instant(0), "Asia/Tokyo", ZoneInfoDatabase())
        >>> m.hour, m.instant == Instant(0)
        (9, True)
    """
    if not isinstance(target, Zone):
        if database is None:
            database = ZoneInfoDatabase()
        target = resolve_zone(target, database)
    return extract_components(instant, target)


__all__ = ["convert"]
