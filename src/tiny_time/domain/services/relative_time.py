from __future__ import annotations

from tiny_time.domain.value_objects import NANOS_PER_DAY, truncate_div


def days_between(start: int, end: int) -> int:
    """Return the number of whole days from start to end.

    The difference is divided with truncation toward zero, so a negative
    span of 1.5 days is -1, not -2. Do not switch this to floor division.
    """
    return truncate_div(end - start, NANOS_PER_DAY)
