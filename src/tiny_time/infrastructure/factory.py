"""Factory that selects the TimeProvider backend for the current host.

Selection happens once, here. Providers never branch on the platform.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from structlog import get_logger

from tiny_time.infrastructure.config import Backend, TinyTimeSettings
from tiny_time.infrastructure.js_time_provider import JsDateTimeProvider
from tiny_time.infrastructure.time_provider import NativeTimeProvider

if TYPE_CHECKING:
    from tiny_time.application.ports import Clock, TimeProvider

logger = get_logger()

JS_HOST_PLATFORM = "emscripten"


def detect_backend(platform: str | None = None) -> Backend:
    """Return the backend native to the given (or current) platform."""
    platform = sys.platform if platform is None else platform
    return Backend.JS if platform == JS_HOST_PLATFORM else Backend.NATIVE


def new_time_provider(
    settings: TinyTimeSettings | None = None,
    clock: Clock | None = None,
    date_ctor: Any = None,
) -> TimeProvider:
    """Build the TimeProvider for this host.

    Args:
        settings: Backend choice; defaults to TinyTimeSettings.from_env().
        clock: Clock override, mostly for tests. Defaults to the backend's
            own clock.
        date_ctor: JavaScript Date constructor for the JS backend. Defaults
            to ``js.Date``.

    Returns:
        A NativeTimeProvider or a JsDateTimeProvider.

    Raises:
        BackendUnavailableError: If the JS backend is selected but no
            JavaScript host is reachable.
    """
    settings = settings if settings is not None else TinyTimeSettings.from_env()

    backend = settings.backend
    detected = backend is Backend.AUTO
    if detected:
        backend = detect_backend()

    logger.debug("time_provider_selected", backend=backend.value, detected=detected)

    if backend is Backend.JS:
        return JsDateTimeProvider(date_ctor=date_ctor, clock=clock)
    return NativeTimeProvider(clock=clock)
