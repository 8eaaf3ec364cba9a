"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest


class FakeClock:
    """Programmable clock.  Pass ``clock.now`` to ``override_now``."""

    def __init__(self, start: datetime):
        self._now = start
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self._now

    def advance(self, **delta: float) -> None:
        self._now += timedelta(**delta)


@pytest.fixture
def fixed_instant():
    return datetime(2024, 3, 15, 14, 30, 15, tzinfo=UTC)


@pytest.fixture
def clock(fixed_instant):
    return FakeClock(fixed_instant)
