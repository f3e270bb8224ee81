"""Shared fixtures for the RollToken test suite."""

import pytest

from rolltoken import RollingTokenManager


class FakeClock:
    """Controllable clock returning a fixed unix timestamp."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def set_bucket(self, bucket, interval, into=0):
        """Move to ``into`` seconds past the start of ``bucket``."""
        self.now = bucket * interval + into

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ('ROLLTOKEN_INTERVAL', 'ROLLTOKEN_TOLERANCE', 'ROLLTOKEN_SECRET',
                 'ROLLTOKEN_DEBUG', 'ROLLTOKEN_LOG', 'ROLLTOKEN_LOG_DIR'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_clock():
    # 100 seconds into bucket 470000 of a one-hour interval
    return FakeClock(470000 * 3600 + 100)


@pytest.fixture
def make_manager(fake_clock):
    def _make(secret=b"my_secret", interval=3600, tolerance=1):
        return RollingTokenManager(secret, interval, tolerance, clock=fake_clock)
    return _make
