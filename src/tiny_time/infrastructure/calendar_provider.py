"""Shared TimeProvider behaviour for calendar-backed implementations.

Coercion, pass-through checks, strict parsing and relative-time logic are
identical for every backend. A backend only supplies two calendar
primitives: breaking whole Unix seconds into UTC fields, and turning date
components into the Unix seconds of their midnight.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from tiny_time.application.ports import TimeProvider
from tiny_time.domain.exceptions import (
    CoercionError,
    InvalidCalendarDateError,
    TimeParseError,
)
from tiny_time.domain.services import (
    CivilDateTime,
    InputKind,
    classify,
    coerce_instant,
    coerce_minutes_of_day,
    days_between,
    is_clock_string,
    is_full_clock_string,
    is_short_clock_string,
    parse_time,
    render_clock,
    render_date,
    split_clock,
    split_date,
)
from tiny_time.domain.services.shapes import DATE_LENGTH, SHORT_CLOCK_LENGTH
from tiny_time.domain.value_objects import NANOS_PER_SECOND, is_instant, to_unix_seconds

if TYPE_CHECKING:
    from collections.abc import Callable

    from tiny_time.application.ports import Clock
    from tiny_time.domain.services import DateParts
    from tiny_time.domain.value_objects import MinutesOfDay

DATE_TIME_LENGTH = 19
DATE_TIME_SHORT_LENGTH = 16


class CalendarTimeProvider(TimeProvider):
    """Template for TimeProvider backends.

    Responsibilities:
    - Coerce inputs and map coercion failures to "" (formatters)
    - Validate shapes strictly and raise TimeParseError (parsers)
    - Round-trip parsed dates through the backend calendar to reject
      dates the calendar silently auto-corrects (e.g. Feb 30 -> Mar 1)
    - Take exactly one clock read per relative-time call
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    @abstractmethod
    def _civil(self, unix_seconds: int) -> CivilDateTime:
        """Break whole Unix seconds into UTC calendar fields."""

    @abstractmethod
    def _midnight_seconds(self, parts: DateParts) -> int:
        """Return Unix seconds of midnight UTC for the given date.

        Backends may auto-correct impossible dates or raise
        InvalidCalendarDateError; the caller re-checks either way.
        """

    # -------------------------------------------------------------------------
    # Clock
    # -------------------------------------------------------------------------

    def now(self) -> int:
        return self._clock.now_ns()

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format_date(self, value: object) -> str:
        if classify(value) is InputKind.STRING and self._is_date_string(value):
            return value
        return self._format_instant(value, CivilDateTime.date_string)

    def format_time(self, value: object) -> str:
        kind = classify(value)
        if kind is InputKind.STRING and is_clock_string(value):
            return value
        if kind is InputKind.INTEGER16:
            minutes = coerce_minutes_of_day(value)
            return render_clock(minutes.hours, minutes.minutes)
        return self._format_instant(value, CivilDateTime.time_string)

    def format_date_time(self, value: object) -> str:
        if classify(value) is InputKind.STRING and self._is_date_time_string(value):
            return value
        return self._format_instant(value, CivilDateTime.date_time_string)

    def format_date_time_short(self, value: object) -> str:
        if classify(value) is InputKind.STRING and self._is_date_time_short_string(value):
            return value
        return self._format_instant(value, CivilDateTime.date_time_short_string)

    def unix_seconds_to_date(self, seconds: int) -> str:
        if classify(seconds) is not InputKind.INTEGER64:
            return ""
        if not is_instant(seconds * NANOS_PER_SECOND):
            return ""
        return self._civil(seconds).date_time_short_string()

    def unix_nano_to_time(self, value: object) -> str:
        return self._format_instant(value, CivilDateTime.time_string)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_date(self, date_str: str) -> int:
        seconds = self._checked_midnight_seconds(date_str)
        instant = seconds * NANOS_PER_SECOND
        if not is_instant(instant):
            raise InvalidCalendarDateError(f"date out of instant range: {date_str}")
        return instant

    def parse_time(self, time_str: str) -> MinutesOfDay:
        return parse_time(time_str)

    def parse_date_time(self, date_str: str, time_str: str) -> int:
        if isinstance(time_str, str) and len(time_str) == SHORT_CLOCK_LENGTH:
            time_str += ":00"
        try:
            midnight = self._checked_midnight_seconds(date_str) * NANOS_PER_SECOND
            clock = split_clock(time_str)
        except TimeParseError as e:
            raise type(e)(f"invalid date/time: {date_str!r} {time_str!r}: {e}") from e

        offset = (clock.hour * 3600 + clock.minute * 60 + clock.second) * NANOS_PER_SECOND
        instant = midnight + offset
        if not is_instant(instant):
            raise InvalidCalendarDateError(
                f"invalid date/time: {date_str!r} {time_str!r}: out of instant range"
            )
        return instant

    # -------------------------------------------------------------------------
    # Relative time
    # -------------------------------------------------------------------------

    def is_today(self, instant: int) -> bool:
        if not is_instant(instant):
            return False
        now = self._clock.now_ns()
        today = self._civil(to_unix_seconds(now)).date_string()
        return self._civil(to_unix_seconds(instant)).date_string() == today

    def is_past(self, instant: int) -> bool:
        return instant < self._clock.now_ns()

    def is_future(self, instant: int) -> bool:
        return instant > self._clock.now_ns()

    def days_between(self, start: int, end: int) -> int:
        return days_between(start, end)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _format_instant(self, value: object, render: Callable[[CivilDateTime], str]) -> str:
        try:
            instant = coerce_instant(value)
        except CoercionError:
            return ""
        return render(self._civil(to_unix_seconds(instant)))

    def _checked_midnight_seconds(self, date_str: str) -> int:
        parts = split_date(date_str)
        if parts.year < 1:
            raise InvalidCalendarDateError(f"invalid date: {date_str} (year 0000)")

        seconds = self._midnight_seconds(parts)
        corrected = self._civil(seconds).date_string()
        if corrected != render_date(*parts):
            raise InvalidCalendarDateError(
                f"invalid date: {date_str} (auto-corrected to {corrected})"
            )
        return seconds

    def _is_date_string(self, text: str) -> bool:
        try:
            self._checked_midnight_seconds(text)
        except TimeParseError:
            return False
        return True

    def _is_date_time_string(self, text: str) -> bool:
        return (
            len(text) == DATE_TIME_LENGTH
            and text[DATE_LENGTH] == " "
            and self._is_date_string(text[:DATE_LENGTH])
            and is_full_clock_string(text[DATE_LENGTH + 1 :])
        )

    def _is_date_time_short_string(self, text: str) -> bool:
        return (
            len(text) == DATE_TIME_SHORT_LENGTH
            and text[DATE_LENGTH] == " "
            and self._is_date_string(text[:DATE_LENGTH])
            and is_short_clock_string(text[DATE_LENGTH + 1 :])
        )
