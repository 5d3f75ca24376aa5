"""Two-phase byte throttle for a single transfer."""

import logging
import time
from dataclasses import dataclass
from typing import Protocol

from ..errors import ClockError
from ..values import PaceDecision, ThrottleConfig

logger = logging.getLogger(__name__)

# Length of the accounting window in seconds
WINDOW_SECONDS = 1.0


class Clock(Protocol):
    """Protocol for time source (allows testing)."""

    def now(self) -> float:
        """Current time in seconds. Must not go backwards."""
        ...


class MonotonicClock:
    """Clock backed by time.monotonic()."""

    def __init__(self) -> None:
        try:
            info = time.get_clock_info("monotonic")
        except ValueError as e:
            raise ClockError("Monotonic clock is unavailable") from e
        if not info.monotonic:
            raise ClockError(f"Clock {info.implementation} is not monotonic")

    def now(self) -> float:
        return time.monotonic()


@dataclass
class ThrottleState:
    """Mutable pacing state, owned by exactly one throttle."""

    start_time: float
    window_start: float
    bytes_sent_in_window: int = 0


class RateThrottler:
    """Paces the bytes of one transfer against a ThrottleConfig.

    The throttle never sleeps and never writes. pace() only tells the caller
    how many bytes may go out now and how long to wait before asking again.
    Not thread-safe: create one instance per transfer.
    """

    def __init__(self, config: ThrottleConfig, clock: Clock | None = None) -> None:
        self._config = config
        self._clock = clock or MonotonicClock()
        now = self._clock.now()
        self._state = ThrottleState(start_time=now, window_start=now)
        self._sustained = config.enabled and config.burst_timeout <= 0

    @property
    def config(self) -> ThrottleConfig:
        return self._config

    @property
    def state(self) -> ThrottleState:
        """Copy of the current pacing state."""
        return ThrottleState(
            start_time=self._state.start_time,
            window_start=self._state.window_start,
            bytes_sent_in_window=self._state.bytes_sent_in_window,
        )

    @property
    def elapsed(self) -> float:
        """Seconds since the throttle started, never negative."""
        return max(0.0, self._clock.now() - self._state.start_time)

    @property
    def in_burst(self) -> bool:
        """Whether the burst rate currently applies."""
        return self._config.enabled and self.elapsed < self._config.burst_timeout

    @property
    def current_rate(self) -> int | None:
        """Active rate in bytes/second, None when throttling is disabled."""
        if not self._config.enabled:
            return None
        return self._config.active_rate(self.elapsed)

    def pace(self, n: int) -> PaceDecision:
        """Ask to send n bytes.

        Args:
            n: Number of bytes the caller wants to write next.

        Returns:
            PaceDecision with the number of bytes that may be written now
            and the seconds to wait before calling pace() for the rest.
        """
        if n < 0:
            raise ValueError("Byte count must not be negative")
        if n == 0:
            return PaceDecision(0, 0.0)
        if not self._config.enabled:
            return PaceDecision(n, 0.0)

        state = self._state
        now = self._clock.now()
        elapsed = max(0.0, now - state.start_time)
        rate = self._config.active_rate(elapsed)

        if not self._sustained and elapsed >= self._config.burst_timeout:
            self._sustained = True
            logger.info(
                "Burst phase over elapsed=%.3f rate=%d",
                elapsed,
                self._config.rate_limit,
            )

        since_window = now - state.window_start
        if since_window >= WINDOW_SECONDS or since_window < 0:
            state.window_start = now
            state.bytes_sent_in_window = 0

        budget = max(0, rate - state.bytes_sent_in_window)
        permitted = min(n, budget)

        wait = 0.0
        if permitted < n:
            wait = max(0.0, state.window_start + WINDOW_SECONDS - now)
            logger.debug(
                "Window budget exhausted permitted=%d requested=%d wait=%.3f",
                permitted,
                n,
                wait,
            )

        state.bytes_sent_in_window += permitted
        return PaceDecision(permitted, wait)
