from __future__ import annotations

import time
from typing import Any

from tiny_time.application.ports import Clock
from tiny_time.domain.value_objects import NANOS_PER_MILLI, NANOS_PER_SECOND, is_instant


class SystemClock(Clock):
    """Production clock using the host operating system."""

    def now_ns(self) -> int:
        return time.time_ns()


class JsDateClock(Clock):
    """Clock backed by a JavaScript Date constructor.

    The engine only offers millisecond precision; the value is scaled to
    nanoseconds with exact integer arithmetic.
    """

    def __init__(self, date_ctor: Any) -> None:
        self._date_ctor = date_ctor

    def now_ns(self) -> int:
        ms = self._date_ctor.new().getTime()
        return int(ms) * NANOS_PER_MILLI


class FixedClock(Clock):
    """Test clock with a controllable fixed instant.

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, fixed_ns: int) -> None:
        self._validate_instant(fixed_ns)
        self._fixed_ns = fixed_ns

    def now_ns(self) -> int:
        return self._fixed_ns

    def set_time(self, new_ns: int) -> None:
        """Explicitly change the fixed instant for testing scenarios."""
        self._validate_instant(new_ns)
        self._fixed_ns = new_ns

    def advance(self, nanos: int = 0, *, seconds: int = 0) -> None:
        """Move the fixed instant forward (or backward, if negative)."""
        self.set_time(self._fixed_ns + nanos + seconds * NANOS_PER_SECOND)

    def _validate_instant(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"instant must be an int, got {type(value).__name__}")
        if not is_instant(value):
            raise ValueError(f"instant must fit in a signed 64-bit integer, got {value}")
