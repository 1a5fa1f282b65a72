"""Instant: signed 64-bit nanoseconds since the Unix epoch, UTC.

Instants are plain ints. This module holds the unit constants and the
explicit truncation helpers; nothing else is allowed to round an Instant.
"""

from __future__ import annotations

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_DAY = 86_400 * NANOS_PER_SECOND

INSTANT_MIN = -(2**63)
INSTANT_MAX = 2**63 - 1


def is_instant(value: int) -> bool:
    """Return True if value fits in a signed 64-bit nanosecond count."""
    return INSTANT_MIN <= value <= INSTANT_MAX


def truncate_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (not floor)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def to_unix_seconds(instant: int) -> int:
    """Truncate an instant toward zero to whole Unix seconds."""
    return truncate_div(instant, NANOS_PER_SECOND)
