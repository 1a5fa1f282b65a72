"""Domain services - Stateless operations on time values."""

from tiny_time.domain.services.civil import CivilDateTime, render_clock, render_date
from tiny_time.domain.services.coercion import (
    InputKind,
    classify,
    coerce_instant,
    coerce_minutes_of_day,
)
from tiny_time.domain.services.relative_time import days_between
from tiny_time.domain.services.shapes import (
    ClockParts,
    DateParts,
    is_clock_string,
    is_full_clock_string,
    is_short_clock_string,
    parse_time,
    split_clock,
    split_date,
)

__all__ = [
    "CivilDateTime",
    "ClockParts",
    "DateParts",
    "InputKind",
    "classify",
    "coerce_instant",
    "coerce_minutes_of_day",
    "days_between",
    "is_clock_string",
    "is_full_clock_string",
    "is_short_clock_string",
    "parse_time",
    "render_clock",
    "render_date",
    "split_clock",
    "split_date",
]
