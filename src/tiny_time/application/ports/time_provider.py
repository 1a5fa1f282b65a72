from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tiny_time.domain.value_objects import MinutesOfDay


class TimeProvider(ABC):
    """Port for time utilities.

    Contract:
    - Instants are ints: nanoseconds since the Unix epoch, UTC
    - Everything is UTC; there is no local time anywhere
    - format_*() NEVER raise; any input they cannot use yields ""
    - parse_*() ALWAYS raise TimeParseError on bad input, never return a dummy
    - is_today/is_past/is_future read the clock on every call
    - Implementations hold no mutable state shared across calls
    """

    @abstractmethod
    def now(self) -> int:
        """Return the current instant in nanoseconds since epoch."""

    @abstractmethod
    def format_date(self, value: object) -> str:
        """Format an instant as YYYY-MM-DD.

        A string already in that shape is returned unchanged.
        Returns "" if the value cannot be coerced.
        """

    @abstractmethod
    def format_time(self, value: object) -> str:
        """Format an instant as HH:MM:SS, or a MinutesOfDay as HH:MM.

        A string already in either shape is returned unchanged.
        Returns "" if the value cannot be coerced.
        """

    @abstractmethod
    def format_date_time(self, value: object) -> str:
        """Format an instant as YYYY-MM-DD HH:MM:SS (pass-through for strings)."""

    @abstractmethod
    def format_date_time_short(self, value: object) -> str:
        """Format an instant as YYYY-MM-DD HH:MM, seconds truncated."""

    @abstractmethod
    def parse_date(self, date_str: str) -> int:
        """Parse YYYY-MM-DD into the instant at midnight UTC.

        Raises:
            TimeParseError: If the shape is wrong or the date does not exist.
        """

    @abstractmethod
    def parse_time(self, time_str: str) -> MinutesOfDay:
        """Parse HH:MM or HH:MM:SS into minutes since midnight.

        Raises:
            TimeParseError: If the shape is wrong or a field is out of range.
        """

    @abstractmethod
    def parse_date_time(self, date_str: str, time_str: str) -> int:
        """Parse a date and an HH:MM / HH:MM:SS time into one UTC instant.

        Raises:
            TimeParseError: If either part fails; the subclass names the cause.
        """

    @abstractmethod
    def is_today(self, instant: int) -> bool:
        """Return True if instant falls on the current UTC calendar date.

        Values outside the 64-bit instant range are never today.
        """

    @abstractmethod
    def is_past(self, instant: int) -> bool:
        """Return True if instant is strictly before now."""

    @abstractmethod
    def is_future(self, instant: int) -> bool:
        """Return True if instant is strictly after now."""

    @abstractmethod
    def days_between(self, start: int, end: int) -> int:
        """Return whole days from start to end, truncated toward zero."""

    @abstractmethod
    def unix_seconds_to_date(self, seconds: int) -> str:
        """Format whole Unix seconds as YYYY-MM-DD HH:MM, or "" on bad input."""

    @abstractmethod
    def unix_nano_to_time(self, value: object) -> str:
        """Format an instant-coercible value as HH:MM:SS, or "" on bad input."""
