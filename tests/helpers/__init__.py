"""Test helpers shared across the suite."""

from tests.helpers.fake_js_date import FakeDateConstructor, FakeJsDate
from tests.helpers.instants import KNOWN_INSTANT, KNOWN_UNIX_SECONDS

__all__ = [
    "FakeDateConstructor",
    "FakeJsDate",
    "KNOWN_INSTANT",
    "KNOWN_UNIX_SECONDS",
]
