"""Internal utilities for Datewise.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar helpers
    - Argument validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.calendar import days_in_month, is_leap_year, iso_week
from datewise._internal.validation import validate_amount, validate_epoch_millis

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "iso_week",
    "validate_amount",
    "validate_epoch_millis",
]
