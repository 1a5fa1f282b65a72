"""Structured logging configuration with structlog.

The library never configures logging on import. Applications that want
tiny-time's debug events rendered call configure_logging() once at startup:

    from tiny_time.infrastructure import TinyTimeSettings, configure_logging

    configure_logging(TinyTimeSettings.from_env())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor

    from tiny_time.infrastructure.config import TinyTimeSettings


def configure_logging(settings: TinyTimeSettings, *, colors: bool = False) -> None:
    """Configure structlog for console output at the configured level.

    Args:
        settings: Supplies the filtering level.
        colors: Enable ANSI colors in the console renderer.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=colors),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
