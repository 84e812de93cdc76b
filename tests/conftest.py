"""Pytest configuration and fixtures for readable-time tests."""

import os
import time
from datetime import datetime

import pytest

# Reference "now" used by the documented scenarios
NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed current instant."""
    return NOW


@pytest.fixture
def fixed_clock(now: datetime):
    """Clock that always returns the fixed current instant."""
    return lambda: now


@pytest.fixture
def new_york_tz():
    """Switch the process local timezone to America/New_York for one test.

    The zone observes DST: clocks jump forward on 2024-03-10 at 02:00 and
    back on 2024-11-03 at 02:00. Restores the previous TZ afterwards.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    previous = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    try:
        if "EST" not in time.tzname:
            pytest.skip("America/New_York zone data is not installed")
        yield
    finally:
        if previous is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = previous
        time.tzset()
