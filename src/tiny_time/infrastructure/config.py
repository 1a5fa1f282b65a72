"""tiny-time configuration.

Environment Variables:
- TINY_TIME_BACKEND: Backend to use: auto, native or js (default: auto)
- TINY_TIME_LOG_LEVEL: structlog filtering level (default: WARNING)

Unknown values in the environment fall back to the defaults. Invalid values
passed directly to TinyTimeSettings raise ValueError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

BACKEND_ENV = "TINY_TIME_BACKEND"
LOG_LEVEL_ENV = "TINY_TIME_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class Backend(Enum):
    """Which TimeProvider implementation the factory builds."""

    AUTO = "auto"
    NATIVE = "native"
    JS = "js"


def _get_backend_env(key: str, default: Backend) -> Backend:
    """Get a Backend from the environment, falling back to default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return Backend(value.strip().lower())
    except ValueError:
        return default


def _get_log_level_env(key: str, default: str) -> str:
    """Get a logging level name from the environment, falling back to default."""
    value = os.environ.get(key)
    if value is None:
        return default
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return default
    return name


@dataclass(frozen=True)
class TinyTimeSettings:
    """Settings for provider selection and logging.

    Attributes:
        backend: Backend to build; AUTO detects the host at factory time.
        log_level: Level name passed to configure_logging().
    """

    backend: Backend = Backend.AUTO
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not isinstance(self.backend, Backend):
            raise ValueError(f"backend must be a Backend, got {self.backend!r}")
        if not isinstance(self.log_level, str):
            raise ValueError(f"unknown log level: {self.log_level!r}")
        name = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", name)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> TinyTimeSettings:
        """Create settings from environment variables."""
        return cls(
            backend=_get_backend_env(BACKEND_ENV, Backend.AUTO),
            log_level=_get_log_level_env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        )
