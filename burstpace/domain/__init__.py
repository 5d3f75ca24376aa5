"""Pure domain layer - no infrastructure dependencies."""

# Errors
from .errors import ClockError, ConfigError, ThrottleError

# Ports
from .ports import DataSource, OutputSink

# Services
from .services import (
    WINDOW_SECONDS,
    Clock,
    MonotonicClock,
    RateThrottler,
    ThrottleState,
)

# Value Objects
from .values import (
    DEFAULT_BURST_LIMIT,
    DEFAULT_BURST_TIMEOUT,
    DEFAULT_RATE_LIMIT,
    PaceDecision,
    ThrottleConfig,
)

__all__ = [
    # Values
    "ThrottleConfig",
    "DEFAULT_BURST_LIMIT",
    "DEFAULT_RATE_LIMIT",
    "DEFAULT_BURST_TIMEOUT",
    "PaceDecision",
    # Errors
    "ThrottleError",
    "ConfigError",
    "ClockError",
    # Services
    "RateThrottler",
    "ThrottleState",
    "Clock",
    "MonotonicClock",
    "WINDOW_SECONDS",
    # Ports
    "OutputSink",
    "DataSource",
]
