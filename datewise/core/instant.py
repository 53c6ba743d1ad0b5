"""Instant class representing an absolute point in time.

This module provides the Instant class: a zone-independent point on the
timeline stored as a signed count of milliseconds since the Unix epoch.
"""

from __future__ import annotations

from datewise._internal.constants import MILLIS_PER_SECOND
from datewise._internal.validation import validate_epoch_millis


class Instant:
    """An absolute point in time with millisecond precision.

    Instants are immutable and totally ordered. They carry no timezone;
    a calendar view is obtained by projecting an Instant into a Zone
    (see ``datewise.core.moment.extract_components``).

    Attributes:
        epoch_millis: Milliseconds since 1970-01-01T00:00:00Z.
        epoch_seconds: Whole seconds since the epoch (floored).

    Examples:
        >>> t = Instant(1_736_294_400_000)
        >>> t.epoch_seconds
        1736294400

        >>> Instant(0) < Instant(1)
        True

        >>> Instant(1_000).plus_millis(-1_000) == Instant(0)
        True
    """

    __slots__ = ("_millis",)

    def __init__(self, epoch_millis: int) -> None:
        """Create an Instant from epoch milliseconds.

        Raises:
            TypeError: If epoch_millis is not an int.
            InvalidAmount: If epoch_millis is outside years 1-9999.
        """
        if isinstance(epoch_millis, bool) or not isinstance(epoch_millis, int):
            raise TypeError(
                f"epoch_millis must be an integer, got {type(epoch_millis).__name__}"
            )
        self._millis: int = validate_epoch_millis(epoch_millis)

    @classmethod
    def from_epoch_seconds(cls, seconds: int) -> Instant:
        """Create an Instant from whole epoch seconds."""
        return cls(seconds * MILLIS_PER_SECOND)

    @property
    def epoch_millis(self) -> int:
        return self._millis

    @property
    def epoch_seconds(self) -> int:
        return self._millis // MILLIS_PER_SECOND

    def plus_millis(self, millis: int) -> Instant:
        """Return a new Instant offset by a signed number of milliseconds.

        Raises:
            InvalidAmount: If the result falls outside years 1-9999.
        """
        return Instant(self._millis + millis)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_millis"):
            raise AttributeError("Instant is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        return f"Instant({self._millis})"


__all__ = ["Instant"]
