"""Domain services - pure business logic operations."""

from .rate_throttler import (
    WINDOW_SECONDS,
    Clock,
    MonotonicClock,
    RateThrottler,
    ThrottleState,
)

__all__ = [
    "RateThrottler",
    "ThrottleState",
    "Clock",
    "MonotonicClock",
    "WINDOW_SECONDS",
]
