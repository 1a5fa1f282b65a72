"""Tests for input coercion.

Tests cover:
- Classification into the closed InputKind set
- Instant coercion from int, float and integer strings
- The empty-string policy ("" is the epoch)
- MinutesOfDay coercion
- Every failure path raising CoercionError and nothing else
"""

import math

import pytest

from tiny_time.domain.exceptions import CoercionError
from tiny_time.domain.services.coercion import (
    InputKind,
    classify,
    coerce_instant,
    coerce_minutes_of_day,
)
from tiny_time.domain.value_objects import INSTANT_MAX, INSTANT_MIN, MinutesOfDay

KNOWN_INSTANT = 1_624_397_134_000_000_000

# =============================================================================
# Classification
# =============================================================================


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (0, InputKind.INTEGER64),
            (KNOWN_INSTANT, InputKind.INTEGER64),
            (MinutesOfDay(10), InputKind.INTEGER16),
            (1.5, InputKind.FLOAT64),
            ("123", InputKind.STRING),
            ("", InputKind.STRING),
            (None, InputKind.UNSUPPORTED),
            (True, InputKind.UNSUPPORTED),
            (b"123", InputKind.UNSUPPORTED),
            ([1], InputKind.UNSUPPORTED),
            (object(), InputKind.UNSUPPORTED),
        ],
    )
    def test_classifies_value(self, value: object, kind: InputKind) -> None:
        assert classify(value) is kind


# =============================================================================
# Instant Coercion
# =============================================================================


class TestCoerceInstant:
    def test_int_passes_through(self) -> None:
        assert coerce_instant(KNOWN_INSTANT) == KNOWN_INSTANT

    def test_negative_int_passes_through(self) -> None:
        assert coerce_instant(-5) == -5

    def test_float_truncates_toward_zero(self) -> None:
        assert coerce_instant(1.9) == 1
        assert coerce_instant(-1.9) == -1

    def test_float_of_known_instant(self) -> None:
        assert coerce_instant(float(KNOWN_INSTANT)) == KNOWN_INSTANT

    def test_digit_string(self) -> None:
        assert coerce_instant(str(KNOWN_INSTANT)) == KNOWN_INSTANT

    def test_negative_digit_string(self) -> None:
        assert coerce_instant("-1000") == -1000

    def test_empty_string_is_epoch(self) -> None:
        assert coerce_instant("") == 0

    def test_bounds_are_accepted(self) -> None:
        assert coerce_instant(INSTANT_MIN) == INSTANT_MIN
        assert coerce_instant(str(INSTANT_MAX)) == INSTANT_MAX

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            "12a",
            " 12",
            "12 ",
            "+12",
            "1_000",
            "-",
            "--1",
            "1.5",
            "١٢",  # Arabic-Indic digits
        ],
    )
    def test_rejects_non_integer_strings(self, value: str) -> None:
        with pytest.raises(CoercionError):
            coerce_instant(value)

    @pytest.mark.parametrize("value", [INSTANT_MAX + 1, INSTANT_MIN - 1, 2**64])
    def test_rejects_ints_outside_64_bits(self, value: int) -> None:
        with pytest.raises(CoercionError):
            coerce_instant(value)

    def test_rejects_string_outside_64_bits(self) -> None:
        with pytest.raises(CoercionError):
            coerce_instant(str(INSTANT_MAX + 1))

    def test_rejects_strings_past_int_conversion_limit(self) -> None:
        with pytest.raises(CoercionError, match="too long"):
            coerce_instant("9" * 5000)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 1e19])
    def test_rejects_unrepresentable_floats(self, value: float) -> None:
        with pytest.raises(CoercionError):
            coerce_instant(value)

    @pytest.mark.parametrize("value", [None, True, False, b"1", [1], {"a": 1}, MinutesOfDay(5)])
    def test_rejects_unsupported_kinds(self, value: object) -> None:
        with pytest.raises(CoercionError):
            coerce_instant(value)


# =============================================================================
# MinutesOfDay Coercion
# =============================================================================


class TestCoerceMinutesOfDay:
    def test_minutes_of_day_passes_through(self) -> None:
        minutes = MinutesOfDay(510)

        assert coerce_minutes_of_day(minutes) is minutes

    def test_short_time_string(self) -> None:
        assert coerce_minutes_of_day("08:30") == MinutesOfDay(510)

    def test_full_time_string_drops_seconds(self) -> None:
        assert coerce_minutes_of_day("08:30:59") == MinutesOfDay(510)

    def test_rejects_out_of_range_string(self) -> None:
        with pytest.raises(CoercionError) as exc_info:
            coerce_minutes_of_day("25:00")

        assert exc_info.value.__cause__ is not None

    def test_rejects_plain_int(self) -> None:
        with pytest.raises(CoercionError):
            coerce_minutes_of_day(510)

    def test_rejects_none(self) -> None:
        with pytest.raises(CoercionError):
            coerce_minutes_of_day(None)
