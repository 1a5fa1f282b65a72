from __future__ import annotations

from dataclasses import dataclass

from tiny_time.domain.exceptions import ComponentOutOfRangeError

MINUTES_PER_DAY = 1440


@dataclass(frozen=True, slots=True)
class MinutesOfDay:
    """Value object for a time of day with minute precision and no date.

    Valid range is [0, 1439]; out-of-range values are rejected, never clamped.
    A plain int always means nanoseconds, so time-of-day values must be
    wrapped in this type to be formatted as HH:MM.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ComponentOutOfRangeError(
                f"MinutesOfDay requires an int, got {type(self.value).__name__}"
            )
        if not 0 <= self.value < MINUTES_PER_DAY:
            raise ComponentOutOfRangeError(
                f"MinutesOfDay must be in [0, {MINUTES_PER_DAY - 1}], got {self.value}"
            )

    @classmethod
    def from_hours_minutes(cls, hours: int, minutes: int) -> MinutesOfDay:
        """Build from an hour in [0, 23] and a minute in [0, 59].

        Raises:
            ComponentOutOfRangeError: If either component is out of range.
        """
        if not 0 <= hours <= 23:
            raise ComponentOutOfRangeError(f"Invalid hours: {hours}")
        if not 0 <= minutes <= 59:
            raise ComponentOutOfRangeError(f"Invalid minutes: {minutes}")
        return cls(value=hours * 60 + minutes)

    @property
    def hours(self) -> int:
        return self.value // 60

    @property
    def minutes(self) -> int:
        return self.value % 60
