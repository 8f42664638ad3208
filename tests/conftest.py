"""Shared fixtures."""

from datetime import datetime

import pytest

from logger.logger import Logger


class FakeClock:
    """Callable clock whose current time tests can move."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    # Bind the stdout handler before any per-test capture replaces sys.stdout
    Logger.setup(level="DEBUG")


@pytest.fixture
def clock():
    """Clock fixed at 2024-03-15 10:30 local time."""
    return FakeClock(datetime(2024, 3, 15, 10, 30))
