"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Clocks: System, JavaScript Date, and fixed test clocks
- Time Providers: Native and JavaScript Date backends
- Factory: Host detection and backend selection
- Configuration and logging setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from tiny_time.infrastructure.clock import FixedClock, JsDateClock, SystemClock
from tiny_time.infrastructure.config import Backend, TinyTimeSettings
from tiny_time.infrastructure.factory import detect_backend, new_time_provider
from tiny_time.infrastructure.js_time_provider import JsDateTimeProvider
from tiny_time.infrastructure.logging import configure_logging
from tiny_time.infrastructure.time_provider import NativeTimeProvider

__all__ = [
    "Backend",
    "FixedClock",
    "JsDateClock",
    "JsDateTimeProvider",
    "NativeTimeProvider",
    "SystemClock",
    "TinyTimeSettings",
    "configure_logging",
    "detect_backend",
    "new_time_provider",
]
