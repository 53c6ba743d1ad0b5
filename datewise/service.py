"""Date service: the four request-level operations.

Each operation resolves zones, parses literals, computes, and shapes a
JSON-ready payload. The clock is read at most once per request, and every
derived field uses that one reading. Errors never escape: each operation
returns an Outcome, and ``render`` turns it into response text.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from datewise.arithmetic.difference import diff
from datewise.arithmetic.ops import add_duration
from datewise.clock import Clock, SystemClock
from datewise.config import Settings
from datewise.convert.epoch import to_unix_millis, to_unix_seconds
from datewise.convert.timezone import convert
from datewise.core.duration import Duration
from datewise.core.instant import Instant
from datewise.core.moment import CalendarMoment, extract_components
from datewise.errors import DatewiseError
from datewise.format.iso8601 import format_iso8601, parse_iso8601
from datewise.format.locale import LocaleData, get_locale
from datewise.format.relative import format_relative
from datewise.format.strftime import format_human
from datewise.outcome import Outcome
from datewise.units.database import TimezoneDatabase, ZoneInfoDatabase
from datewise.units.timeunit import TimeUnit
from datewise.units.timezone import Zone, resolve_zone

logger = logging.getLogger(__name__)

OPERATIONS: tuple[str, ...] = (
    "get_current_time",
    "calculate_date",
    "get_time_difference",
    "convert_timezone",
)


def _is_all(unit: object) -> bool:
    """True when unit asks for every difference unit ("all", any case)."""
    if unit is None:
        return True
    return isinstance(unit, str) and unit.strip().lower() == "all"


class DateService:
    """Answers current-time, date-arithmetic, difference and conversion
    requests.

    Args:
        settings: Process defaults (zone, locale). Defaults to Settings().
        clock: Source of "now". Defaults to SystemClock().
        database: Timezone database. Defaults to ZoneInfoDatabase().

    Raises:
        InvalidTimezone: If the configured default timezone is unknown.

    Examples:
        >>> from datewise.clock import FixedClock
        >>> from datewise.format.iso8601 import parse_timestamp
        >>> service = DateService(clock=FixedClock(parse_timestamp("2025-01-08T00:00:00Z")))
        >>> outcome = service.get_time_difference(reference_date="2025-01-01T00:00:00Z")
        >>> outcome.value["human_readable"]
        '7 days ago'
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock | None = None,
        database: TimezoneDatabase | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.clock: Clock = clock or SystemClock()
        self.database: TimezoneDatabase = database or ZoneInfoDatabase()
        self.default_zone: Zone = resolve_zone(self.settings.default_timezone, self.database)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_current_time(
        self,
        timezone: str | None = None,
        locale: str | None = None,
    ) -> Outcome:
        """Current time in a zone, with calendar components and context."""

        def run() -> dict[str, Any]:
            now = self.clock.now()
            zone = self._zone(timezone)
            moment = extract_components(now, zone)
            return {
                "current": self._formatted(moment, self._locale(locale)),
                "timezone": {"name": zone.name, "offset": moment.offset},
                "components": self._components(moment),
                "context": self._context(moment),
            }

        return self._run("get_current_time", run)

    def calculate_date(
        self,
        amount: object,
        unit: object,
        base_date: str | None = None,
        base_timezone: str | None = None,
        target_timezone: str | None = None,
        locale: str | None = None,
    ) -> Outcome:
        """Add a signed amount of a unit to a base date (or now).

        Calendar units are counted in the zone the base date was written
        in (its offset, bracketed zone, or ``base_timezone``), or in
        ``base_timezone`` when the base is now. The result is shown in
        ``target_timezone``.
        """

        def run() -> dict[str, Any]:
            now = self.clock.now()
            base_zone = self._zone(base_timezone)
            target_zone = self._zone(target_timezone)
            duration = Duration.of(amount, unit)
            loc = self._locale(locale)

            if base_date is None:
                base, calc_zone = now, base_zone
            else:
                parsed = parse_iso8601(base_date, base_zone, database=self.database)
                base, calc_zone = parsed.instant, parsed.zone

            result = add_duration(base, calc_zone, duration)
            moment = extract_components(result, target_zone)
            context = self._context(moment)
            context["fromNow"] = format_relative(diff(now, result, target_zone), loc)

            return {
                "calculation": {
                    "base_date": format_iso8601(base, calc_zone),
                    "amount": duration.amount,
                    "unit": duration.unit.value,
                    "description": loc.shifted(duration.amount, duration.unit),
                },
                "result": self._formatted(moment, loc),
                "components": self._components(moment),
                "context": context,
            }

        return self._run("calculate_date", run)

    def get_time_difference(
        self,
        reference_date: str,
        reference_timezone: str | None = None,
        unit: str | None = "all",
        target_timezone: str | None = None,
        locale: str | None = None,
    ) -> Outcome:
        """Difference between now and a reference date.

        ``is_past`` is true when the reference date lies before now.
        ``unit`` narrows ``difference`` to one unit; "all" (the default)
        keeps every unit.
        """

        def run() -> dict[str, Any]:
            now = self.clock.now()
            reference_zone = self._zone(reference_timezone)
            target_zone = self._zone(target_timezone)
            selected = None if _is_all(unit) else TimeUnit.parse(unit)
            loc = self._locale(locale)

            reference = parse_iso8601(
                reference_date, reference_zone, database=self.database
            ).instant
            result = diff(now, reference, target_zone)

            if selected is None:
                difference = result.magnitudes()
            else:
                difference = {selected.value: result.get(selected)}

            return {
                "reference_date": self._formatted(
                    extract_components(reference, target_zone), loc
                ),
                "current_date": self._formatted(extract_components(now, target_zone), loc),
                "is_past": result.is_past,
                "relative": "past" if result.is_past else "future",
                "difference": difference,
                "human_readable": format_relative(result, loc),
            }

        return self._run("get_time_difference", run)

    def convert_timezone(
        self,
        source_date: str,
        target_timezone: str,
        source_timezone: str | None = None,
        locale: str | None = None,
    ) -> Outcome:
        """Show a date/time in another zone. The instant itself is unchanged."""

        def run() -> dict[str, Any]:
            source_zone = self._zone(source_timezone)
            target_zone = resolve_zone(target_timezone, self.database)

            parsed = parse_iso8601(source_date, source_zone, database=self.database)
            moment = convert(parsed.instant, target_zone)

            return {
                "input": {
                    "iso": format_iso8601(parsed.instant, parsed.zone),
                    "unix": to_unix_seconds(parsed.instant),
                    "milliseconds": to_unix_millis(parsed.instant),
                },
                "output": {
                    "timezone": target_zone.name,
                    "formatted": self._formatted(moment, self._locale(locale)),
                    "components": self._components(moment),
                    "context": self._context(moment),
                },
            }

        return self._run("convert_timezone", run)

    # ------------------------------------------------------------------
    # Dispatch and rendering
    # ------------------------------------------------------------------

    def execute(self, operation: str, **params: Any) -> Outcome:
        """Run an operation by name with keyword parameters.

        Unknown operations and unexpected parameters produce a failed
        Outcome rather than an exception.
        """
        if operation not in OPERATIONS:
            logger.error(f"Operation not found: {operation}")
            return Outcome.fail(DatewiseError(f"Unknown operation: {operation}"))

        handler: Callable[..., Outcome] = getattr(self, operation)
        try:
            return handler(**params)
        except TypeError as e:
            logger.error(f"Bad parameters for {operation}: {e}")
            return Outcome.fail(DatewiseError(f"Invalid parameters for {operation}: {e}"))

    @staticmethod
    def render(outcome: Outcome) -> str:
        """Render an Outcome as response text.

        Success renders the payload as indented JSON; failure renders a
        one-line error message.
        """
        if outcome.success:
            return json.dumps(outcome.value, indent=2, ensure_ascii=False)
        return f"Error occurred: {outcome.message}"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run(self, name: str, func: Callable[[], dict[str, Any]]) -> Outcome:
        logger.debug(f"Running {name}")
        try:
            return Outcome.ok(func())
        except DatewiseError as e:
            logger.warning(f"{name} failed: {e.code}: {e}")
            return Outcome.fail(e)
        except Exception as e:
            logger.exception(f"Unexpected error in {name}")
            return Outcome.fail(DatewiseError(f"Unexpected error: {e}"))

    def _zone(self, identifier: str | None) -> Zone:
        if identifier is None:
            return self.default_zone
        return resolve_zone(identifier, self.database)

    def _locale(self, locale: str | None) -> LocaleData:
        return get_locale(locale, default=self.settings.default_locale)

    @staticmethod
    def _formatted(moment: CalendarMoment, locale: LocaleData) -> dict[str, Any]:
        instant: Instant = moment.instant
        return {
            "iso": format_iso8601(instant, moment.zone),
            "unix": to_unix_seconds(instant),
            "human": format_human(moment, locale),
            "milliseconds": to_unix_millis(instant),
        }

    @staticmethod
    def _components(moment: CalendarMoment) -> dict[str, Any]:
        return {
            "year": moment.year,
            "month": moment.month,
            "day": moment.day,
            "hour": moment.hour,
            "minute": moment.minute,
            "second": moment.second,
            "millisecond": moment.millisecond,
            "dayOfWeek": moment.weekday,
            "weekOfYear": moment.week_of_year,
            "offset": moment.offset,
            "offsetMinutes": moment.offset_ms // 60_000,
        }

    @staticmethod
    def _context(moment: CalendarMoment) -> dict[str, Any]:
        return {
            "isWeekend": moment.is_weekend,
            "quarter": moment.quarter,
            "dayOfYear": moment.day_of_year,
            "daysInMonth": moment.days_in_month,
        }


__all__ = ["DateService", "OPERATIONS"]
