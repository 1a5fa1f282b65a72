from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING

from tiny_time.domain.exceptions import InvalidCalendarDateError
from tiny_time.domain.services import CivilDateTime
from tiny_time.infrastructure.calendar_provider import CalendarTimeProvider
from tiny_time.infrastructure.clock import SystemClock

if TYPE_CHECKING:
    from tiny_time.application.ports import Clock
    from tiny_time.domain.services import DateParts

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_EPOCH_DATE = _EPOCH.date()
_SECONDS_PER_DAY = 86_400


class NativeTimeProvider(CalendarTimeProvider):
    """Production time provider using the Python runtime's clock and calendar."""

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__(clock if clock is not None else SystemClock())

    def _civil(self, unix_seconds: int) -> CivilDateTime:
        # fromtimestamp() rejects negative values on some platforms.
        dt = _EPOCH + timedelta(seconds=unix_seconds)
        return CivilDateTime(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def _midnight_seconds(self, parts: DateParts) -> int:
        try:
            day = date(parts.year, parts.month, parts.day)
        except ValueError as e:
            raise InvalidCalendarDateError(
                f"invalid date: {parts.year:04d}-{parts.month:02d}-{parts.day:02d}"
            ) from e
        return (day - _EPOCH_DATE).days * _SECONDS_PER_DAY
