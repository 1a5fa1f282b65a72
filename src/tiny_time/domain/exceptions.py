"""Domain exceptions for tiny-time.

Exception hierarchy:
    TinyTimeError (base)
    ├── CoercionError
    ├── Parse Validation Errors
    │   └── TimeParseError (also a ValueError)
    │       ├── MalformedInputError
    │       ├── ComponentOutOfRangeError
    │       └── InvalidCalendarDateError
    └── Backend Errors
        └── BackendUnavailableError

Formatting never lets an exception escape: CoercionError is caught by the
providers and turned into the empty-string sentinel. Parsing always raises.
"""

from __future__ import annotations


class TinyTimeError(Exception):
    """Base exception for all tiny-time errors."""


# =============================================================================
# Coercion Errors
# =============================================================================


class CoercionError(TinyTimeError):
    """Raised when an input cannot be coerced to the requested canonical kind.

    Examples:
        - unsupported input type (None, bool, list, ...)
        - numeric string containing non-digit characters
        - float that is NaN, infinite, or outside the 64-bit range

    Formatting operations translate this into "" for their callers.
    """


# =============================================================================
# Parse Validation Errors
# =============================================================================


class TimeParseError(TinyTimeError, ValueError):
    """Base class for strict parse failures.

    Callers branch on this (e.g. to reject user input). The subclass names
    the structural cause; the message text is informational only.
    """


class MalformedInputError(TimeParseError):
    """Raised when a string does not have the exact expected shape.

    Examples: "2024-2-05", "08h30", "2024-02-05T10:00", a non-str argument.
    """


class ComponentOutOfRangeError(TimeParseError):
    """Raised when a field is well-formed but outside its range.

    Examples: hour 25, minute 60, MinutesOfDay(1440).
    """


class InvalidCalendarDateError(TimeParseError):
    """Raised when date components do not name a real calendar day.

    Examples: "2024-02-30", "2023-02-29", "2024-13-01", or a date whose
    midnight does not fit in a signed 64-bit nanosecond instant.
    """


# =============================================================================
# Backend Errors
# =============================================================================


class BackendUnavailableError(TinyTimeError):
    """Raised when a requested backend cannot run on this host.

    The JavaScript backend needs ``js.Date``, which only exists when Python
    is embedded in a JavaScript engine (Pyodide).
    """
