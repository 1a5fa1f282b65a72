"""Value objects - Immutable time values and their unit constants."""

from tiny_time.domain.value_objects.instant import (
    INSTANT_MAX,
    INSTANT_MIN,
    NANOS_PER_DAY,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    is_instant,
    to_unix_seconds,
    truncate_div,
)
from tiny_time.domain.value_objects.minutes_of_day import MINUTES_PER_DAY, MinutesOfDay

__all__ = [
    "INSTANT_MAX",
    "INSTANT_MIN",
    "MINUTES_PER_DAY",
    "NANOS_PER_DAY",
    "NANOS_PER_MILLI",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "MinutesOfDay",
    "is_instant",
    "to_unix_seconds",
    "truncate_div",
]
