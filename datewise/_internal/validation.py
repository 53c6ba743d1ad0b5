"""Validation utilities for Datewise.

This module provides the checks shared by the arithmetic and parsing
code for keeping values inside the supported range.

This module is not part of the public API.
"""

from __future__ import annotations

import math
import numbers

from datewise._internal.constants import MAX_EPOCH_MILLIS, MIN_EPOCH_MILLIS
from datewise.errors import InvalidAmount


def validate_amount(amount: object) -> int:
    """Validate a duration amount and return it as an int.

    Integers are accepted as-is. Floats are accepted only when they are
    finite and integral (``3.0``), since JSON callers cannot always tell
    the two apart. Booleans are rejected even though they subclass int.

    Args:
        amount: The value to validate.

    Returns:
        The amount as a Python int.

    Raises:
        InvalidAmount: If amount is not an integer or is not finite.

    Examples:
        >>> validate_amount(3)
        3
        >>> validate_amount(-2.0)
        -2
        >>> validate_amount(1.5)
        Traceback (most recent call last):
        ...
        datewise.errors.InvalidAmount: amount must be an integer, got 1.5
    """
    if isinstance(amount, bool):
        raise InvalidAmount(f"amount must be an integer, got {amount!r}")
    if isinstance(amount, numbers.Integral):
        return int(amount)
    if isinstance(amount, numbers.Real):
        value = float(amount)
        if not math.isfinite(value):
            raise InvalidAmount(f"amount must be finite, got {amount!r}")
        if not value.is_integer():
            raise InvalidAmount(f"amount must be an integer, got {amount!r}")
        return int(value)
    raise InvalidAmount(
        f"amount must be an integer, got {type(amount).__name__}"
    )


def validate_epoch_millis(millis: int) -> int:
    """Validate that an epoch millisecond count lies within years 1-9999.

    Raises:
        InvalidAmount: If millis falls outside the supported range.
    """
    if millis < MIN_EPOCH_MILLIS or millis > MAX_EPOCH_MILLIS:
        raise InvalidAmount(
            "result is outside the supported range "
            "(0001-01-01T00:00:00Z to 9999-12-31T23:59:59.999Z)"
        )
    return millis


__all__ = [
    "validate_amount",
    "validate_epoch_millis",
]
