"""Temporal formatting and parsing.

This module provides functions for converting between instants and
strings:
    - ISO 8601 parsing and formatting
    - strftime-style rendering with locale names
    - Single-unit relative phrases ("7 days ago")

Functions:
    parse_iso8601: Parse a literal into instant, zone and offset flag.
    parse_timestamp: Parse a literal into an Instant.
    format_iso8601: Format an Instant in a Zone.
    strftime: Render a CalendarMoment with a pattern.
    format_human: Render a CalendarMoment with the locale's pattern.
    format_relative: Summarise a DifferenceResult in one phrase.
    get_locale: Select English or Japanese locale data.
"""

from __future__ import annotations

from datewise.format.iso8601 import (
    ParsedTimestamp,
    format_iso8601,
    parse_iso8601,
    parse_timestamp,
)
from datewise.format.locale import LocaleData, get_locale
from datewise.format.relative import format_relative
from datewise.format.strftime import format_human, strftime

__all__: list[str] = [
    # ISO 8601
    "ParsedTimestamp",
    "parse_iso8601",
    "parse_timestamp",
    "format_iso8601",
    # Rendering
    "LocaleData",
    "get_locale",
    "strftime",
    "format_human",
    "format_relative",
]
