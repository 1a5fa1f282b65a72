"""TimeProvider backed by the JavaScript Date API.

Used when Python runs embedded in a JavaScript engine (Pyodide), where the
host's ``Date`` constructor is reachable as ``js.Date``. The constructor
handle is resolved once and cached; every call builds fresh Date objects.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from tiny_time.domain.exceptions import BackendUnavailableError, InvalidCalendarDateError
from tiny_time.domain.services import CivilDateTime, render_date
from tiny_time.domain.value_objects import truncate_div
from tiny_time.infrastructure.calendar_provider import CalendarTimeProvider
from tiny_time.infrastructure.clock import JsDateClock

if TYPE_CHECKING:
    from tiny_time.application.ports import Clock
    from tiny_time.domain.services import DateParts

_MILLIS_PER_SECOND = 1000


def load_js_date() -> Any:
    """Return the host engine's Date constructor.

    Raises:
        BackendUnavailableError: If no JavaScript host is available.
    """
    try:
        from js import Date  # type: ignore[import-not-found]
    except ImportError as e:
        raise BackendUnavailableError("js.Date is not available on this host") from e
    return Date


class JsDateTimeProvider(CalendarTimeProvider):
    """Time provider for JavaScript hosts.

    Args:
        date_ctor: The JavaScript Date constructor. Defaults to ``js.Date``.
        clock: Clock source. Defaults to a clock reading ``Date.now`` through
            the same constructor.
    """

    def __init__(self, date_ctor: Any = None, clock: Clock | None = None) -> None:
        self._date_ctor = date_ctor if date_ctor is not None else load_js_date()
        super().__init__(clock if clock is not None else JsDateClock(self._date_ctor))

    def _civil(self, unix_seconds: int) -> CivilDateTime:
        js_date = self._date_ctor.new(unix_seconds * _MILLIS_PER_SECOND)
        return CivilDateTime(
            year=int(js_date.getUTCFullYear()),
            month=int(js_date.getUTCMonth()) + 1,
            day=int(js_date.getUTCDate()),
            hour=int(js_date.getUTCHours()),
            minute=int(js_date.getUTCMinutes()),
            second=int(js_date.getUTCSeconds()),
        )

    def _midnight_seconds(self, parts: DateParts) -> int:
        iso = f"{render_date(*parts)}T00:00:00Z"
        ms = self._date_ctor.new(iso).getTime()
        if isinstance(ms, float) and math.isnan(ms):
            raise InvalidCalendarDateError(f"invalid date: {iso[:10]}")
        return truncate_div(int(ms), _MILLIS_PER_SECOND)
