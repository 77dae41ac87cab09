# tests/conftest.py

import time
from datetime import datetime

import pytest


@pytest.fixture
def new_york(monkeypatch):
    """Host timezone pinned to America/New_York (DST starts 2024-03-10)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    winter = datetime(2024, 1, 15, 12).astimezone().utcoffset()
    summer = datetime(2024, 7, 15, 12).astimezone().utcoffset()
    if winter == summer:
        monkeypatch.undo()
        time.tzset()
        pytest.skip("tz database for America/New_York not available")
    yield
    monkeypatch.undo()
    time.tzset()
