"""Shared test fixtures and configuration."""

import pytest

from burstpace.domain import RateThrottler, ThrottleConfig

# ============= Domain Fixtures =============


@pytest.fixture
def throttle_config():
    """Throttle config from the classic download example."""
    return ThrottleConfig(enabled=True, burst_limit=50000, rate_limit=15000, burst_timeout=30)


@pytest.fixture
def small_throttle_config():
    """Small limits for readable tests."""
    return ThrottleConfig(enabled=True, burst_limit=100, rate_limit=10, burst_timeout=5)


@pytest.fixture
def disabled_config():
    """Passthrough config."""
    return ThrottleConfig.disabled()


# ============= Mock Fixtures =============


class FakeClock:
    """Fake clock for testing the throttle."""

    def __init__(self, start_time: float = 0.0):
        self._time = start_time

    def now(self) -> float:
        return self._time

    def advance(self, seconds: float) -> None:
        self._time += seconds

    def set(self, value: float) -> None:
        self._time = value


@pytest.fixture
def fake_clock():
    """Fake clock starting at 0."""
    return FakeClock()


@pytest.fixture
def throttler(small_throttle_config, fake_clock):
    """Throttle with small limits driven by the fake clock."""
    return RateThrottler(small_throttle_config, fake_clock)


class FakeSink:
    """Sink recording writes, optionally accepting short writes."""

    def __init__(self, max_write: int | None = None, fail_after: int | None = None):
        self._max_write = max_write
        self._fail_after = fail_after
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> int:
        if self._fail_after is not None and self.total >= self._fail_after:
            raise ConnectionResetError("client went away")
        accepted = data if self._max_write is None else data[: self._max_write]
        self.writes.append(bytes(accepted))
        return len(accepted)

    @property
    def total(self) -> int:
        return sum(len(w) for w in self.writes)

    def getvalue(self) -> bytes:
        return b"".join(self.writes)


@pytest.fixture
def fake_sink():
    """Sink accepting everything."""
    return FakeSink()


@pytest.fixture
def make_sink():
    """Factory for sinks with short writes or failures."""
    return FakeSink


@pytest.fixture
def make_clock():
    """Factory for independent fake clocks."""
    return FakeClock
