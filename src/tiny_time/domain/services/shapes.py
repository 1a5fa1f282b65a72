"""Strict shape validation for formatted date and time strings.

Only the exact fixed-width shapes are accepted: ASCII digits, zero-padded,
literal separators. Calendar validity of dates is checked by the backends,
which round-trip the components through their own calendar.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from tiny_time.domain.exceptions import ComponentOutOfRangeError, MalformedInputError
from tiny_time.domain.value_objects import MinutesOfDay

DATE_LENGTH = 10
CLOCK_LENGTH = 8
SHORT_CLOCK_LENGTH = 5

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_CLOCK_RE = re.compile(r"(\d{2}):(\d{2})(?::(\d{2}))?", re.ASCII)


class DateParts(NamedTuple):
    year: int
    month: int
    day: int


class ClockParts(NamedTuple):
    hour: int
    minute: int
    second: int | None


def split_date(text: object) -> DateParts:
    """Split a YYYY-MM-DD string into its numeric components.

    Raises:
        MalformedInputError: If text is not a str of exactly that shape.
    """
    if not isinstance(text, str):
        raise MalformedInputError(f"date must be a string, got {type(text).__name__}")
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise MalformedInputError(f"invalid date format: {text!r}")
    year, month, day = (int(group) for group in match.groups())
    return DateParts(year, month, day)


def split_clock(text: object) -> ClockParts:
    """Split and range-check an HH:MM or HH:MM:SS string.

    Raises:
        MalformedInputError: If text is not a str of either shape.
        ComponentOutOfRangeError: If hours, minutes or seconds are out of range.
    """
    if not isinstance(text, str):
        raise MalformedInputError(f"time must be a string, got {type(text).__name__}")
    match = _CLOCK_RE.fullmatch(text)
    if match is None:
        raise MalformedInputError(f"invalid time format: {text!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    second = None if match.group(3) is None else int(match.group(3))

    if hour > 23:
        raise ComponentOutOfRangeError(f"invalid hours: {match.group(1)}")
    if minute > 59:
        raise ComponentOutOfRangeError(f"invalid minutes: {match.group(2)}")
    if second is not None and second > 59:
        raise ComponentOutOfRangeError(f"invalid seconds: {match.group(3)}")
    return ClockParts(hour, minute, second)


def parse_time(text: object) -> MinutesOfDay:
    """Parse HH:MM or HH:MM:SS into minutes since midnight.

    Seconds are validated and then dropped.
    """
    parts = split_clock(text)
    return MinutesOfDay.from_hours_minutes(parts.hour, parts.minute)


def is_clock_string(text: str) -> bool:
    """Return True if text is a valid HH:MM or HH:MM:SS string."""
    try:
        split_clock(text)
    except (MalformedInputError, ComponentOutOfRangeError):
        return False
    return True


def is_full_clock_string(text: str) -> bool:
    """Return True if text is a valid HH:MM:SS string."""
    return len(text) == CLOCK_LENGTH and is_clock_string(text)


def is_short_clock_string(text: str) -> bool:
    """Return True if text is a valid HH:MM string."""
    return len(text) == SHORT_CLOCK_LENGTH and is_clock_string(text)
