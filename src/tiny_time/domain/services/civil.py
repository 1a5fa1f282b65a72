"""UTC civil date/time fields and their fixed-width renderings.

Backends decompose an instant into CivilDateTime with whatever calendar
they have at hand; rendering is shared so both produce byte-identical output.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CivilDateTime:
    """Broken-down UTC date and time at whole-second precision."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def date_string(self) -> str:
        return render_date(self.year, self.month, self.day)

    def time_string(self) -> str:
        return render_clock(self.hour, self.minute, self.second)

    def short_time_string(self) -> str:
        return render_clock(self.hour, self.minute)

    def date_time_string(self) -> str:
        return f"{self.date_string()} {self.time_string()}"

    def date_time_short_string(self) -> str:
        return f"{self.date_string()} {self.short_time_string()}"


def render_date(year: int, month: int, day: int) -> str:
    """Render YYYY-MM-DD with zero-padded fields."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def render_clock(hour: int, minute: int, second: int | None = None) -> str:
    """Render HH:MM, or HH:MM:SS when seconds are given."""
    if second is None:
        return f"{hour:02d}:{minute:02d}"
    return f"{hour:02d}:{minute:02d}:{second:02d}"
