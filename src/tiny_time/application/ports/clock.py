from __future__ import annotations

from abc import ABC, abstractmethod


class Clock(ABC):
    """Port for the wall-clock source.

    Contract:
    - now_ns() MUST return nanoseconds since the Unix epoch, UTC, as an int
    - now_ns() MUST NOT retry, smooth, or cache reads
    - No monotonicity is promised beyond what the host clock provides
    """

    @abstractmethod
    def now_ns(self) -> int:
        """Return the current instant as nanoseconds since epoch (UTC)."""
        ...
