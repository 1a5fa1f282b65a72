"""Input coercion for the heterogeneous values accepted by the formatters.

Accepted inputs form a closed set (InputKind). Each target kind has exactly
one coercion function; anything it cannot handle raises CoercionError.

Empty-string policy:
    "" coerces to instant 0 (the epoch). Strict parsers never see this rule;
    it only applies where a pure integer is expected.
"""

from __future__ import annotations

import math
import re
from enum import Enum

from tiny_time.domain.exceptions import CoercionError, TimeParseError
from tiny_time.domain.services.shapes import parse_time
from tiny_time.domain.value_objects import MinutesOfDay, is_instant

_INTEGER_RE = re.compile(r"-?\d+", re.ASCII)


class InputKind(Enum):
    """Closed set of input shapes a formatting operation may receive."""

    INTEGER64 = "integer64"
    INTEGER16 = "integer16"
    FLOAT64 = "float64"
    STRING = "string"
    UNSUPPORTED = "unsupported"


def classify(value: object) -> InputKind:
    """Classify a value into its InputKind.

    bool is an int subclass in Python but is never a timestamp.
    """
    if isinstance(value, bool):
        return InputKind.UNSUPPORTED
    if isinstance(value, int):
        return InputKind.INTEGER64
    if isinstance(value, MinutesOfDay):
        return InputKind.INTEGER16
    if isinstance(value, float):
        return InputKind.FLOAT64
    if isinstance(value, str):
        return InputKind.STRING
    return InputKind.UNSUPPORTED


def coerce_instant(value: object) -> int:
    """Coerce a value to an instant (nanoseconds since epoch).

    Args:
        value: int nanoseconds, float nanoseconds (truncated toward zero),
            or a base-10 integer string with an optional leading '-'.

    Returns:
        The instant as an int within the signed 64-bit range.

    Raises:
        CoercionError: If the value is of another kind, is not a clean
            integer string, or falls outside the 64-bit range.
    """
    kind = classify(value)

    if kind is InputKind.INTEGER64:
        instant = value
    elif kind is InputKind.FLOAT64:
        if not math.isfinite(value):
            raise CoercionError(f"Cannot coerce non-finite float {value!r} to an instant")
        instant = math.trunc(value)
    elif kind is InputKind.STRING:
        instant = _parse_integer_string(value)
    else:
        raise CoercionError(f"Cannot coerce {type(value).__name__} to an instant")

    if not is_instant(instant):
        raise CoercionError(f"Instant out of 64-bit range: {instant}")
    return instant


def coerce_minutes_of_day(value: object) -> MinutesOfDay:
    """Coerce a value to MinutesOfDay.

    Accepts a MinutesOfDay as-is, or an HH:MM / HH:MM:SS string.

    Raises:
        CoercionError: For every other input, including malformed strings.
    """
    kind = classify(value)

    if kind is InputKind.INTEGER16:
        return value
    if kind is InputKind.STRING:
        try:
            return parse_time(value)
        except TimeParseError as e:
            raise CoercionError(f"Cannot coerce {value!r} to minutes of day") from e
    raise CoercionError(f"Cannot coerce {type(value).__name__} to minutes of day")


def _parse_integer_string(text: str) -> int:
    if text == "":
        return 0
    if _INTEGER_RE.fullmatch(text) is None:
        raise CoercionError(f"Not an integer string: {text!r}")
    try:
        return int(text)
    except ValueError as e:
        # Past sys.get_int_max_str_digits().
        raise CoercionError(f"Integer string too long: {len(text)} digits") from e
