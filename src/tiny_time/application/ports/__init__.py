"""Ports - Abstract interfaces for the clock and the time utilities.

Ports define the contracts that infrastructure adapters must implement.
Application code depends on TimeProvider only, never on a concrete backend.
"""

from tiny_time.application.ports.clock import Clock
from tiny_time.application.ports.time_provider import TimeProvider

__all__ = [
    "Clock",
    "TimeProvider",
]
