"""Shared pytest fixtures for the test suite."""

import pytest

from tests.helpers import KNOWN_INSTANT, FakeDateConstructor
from tiny_time.application.ports import TimeProvider
from tiny_time.infrastructure.clock import FixedClock
from tiny_time.infrastructure.js_time_provider import JsDateTimeProvider
from tiny_time.infrastructure.time_provider import NativeTimeProvider


@pytest.fixture
def fixed_instant() -> int:
    """A fixed instant for deterministic testing."""
    return KNOWN_INSTANT


@pytest.fixture
def fixed_clock(fixed_instant: int) -> FixedClock:
    """A clock frozen at fixed_instant."""
    return FixedClock(fixed_instant)


@pytest.fixture
def date_ctor(fixed_instant: int) -> FakeDateConstructor:
    """A fake JavaScript Date constructor whose 'now' is fixed_instant."""
    return FakeDateConstructor(now_ms=fixed_instant // 1_000_000)


@pytest.fixture
def native_provider(fixed_clock: FixedClock) -> NativeTimeProvider:
    return NativeTimeProvider(clock=fixed_clock)


@pytest.fixture
def js_provider(date_ctor: FakeDateConstructor, fixed_clock: FixedClock) -> JsDateTimeProvider:
    return JsDateTimeProvider(date_ctor=date_ctor, clock=fixed_clock)


@pytest.fixture(params=["native", "js"])
def provider(request: pytest.FixtureRequest) -> TimeProvider:
    """Each backend in turn, sharing the same fixed clock."""
    return request.getfixturevalue(f"{request.param}_provider")
