"""Timezone database capability.

Zone offsets are looked up through a small injectable interface with a
single "offset-for-instant" operation, so that tests can substitute a
deterministic fake for the IANA database.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datewise._internal.constants import (
    MAX_EPOCH_MILLIS,
    MILLIS_PER_DAY,
    MIN_EPOCH_MILLIS,
)
from datewise.errors import InvalidTimezone

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)
_SAMPLE_MARGIN = 2 * MILLIS_PER_DAY


class TimezoneDatabase(Protocol):
    """Source of UTC offsets for named zones."""

    def offset_for_instant(self, zone_id: str, epoch_millis: int) -> int:
        """Return the UTC offset in milliseconds (east positive) in effect
        in ``zone_id`` at ``epoch_millis``.

        Raises:
            InvalidTimezone: If zone_id is not a known zone.
        """
        ...  # pragma: no cover


class ZoneInfoDatabase:
    """IANA timezone database backed by the standard ``zoneinfo`` module.

    Zone data comes from the system tz database or, where there is none,
    from the ``tzdata`` package.

    Examples:
        >>> db = ZoneInfoDatabase()
        >>> db.offset_for_instant("Asia/Tokyo", 0)
        32400000
    """

    def _zone(self, zone_id: str) -> ZoneInfo:
        try:
            return ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            logger.debug(f"Unknown zone {zone_id!r}: {e}")
            raise InvalidTimezone(f"Invalid timezone: {zone_id}") from None

    def offset_for_instant(self, zone_id: str, epoch_millis: int) -> int:
        tz = self._zone(zone_id)
        # Offsets are sampled a day either side of local readings; keep the
        # sample inside the range datetime can represent.
        millis = min(
            max(epoch_millis, MIN_EPOCH_MILLIS + _SAMPLE_MARGIN),
            MAX_EPOCH_MILLIS - _SAMPLE_MARGIN,
        )
        local = (_EPOCH + timedelta(milliseconds=millis)).astimezone(tz)
        offset = local.utcoffset()
        if offset is None:
            return 0
        return offset // _ONE_MILLI


__all__ = ["TimezoneDatabase", "ZoneInfoDatabase"]
