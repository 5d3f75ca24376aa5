"""Domain value objects - immutable data structures."""

from .pace_decision import PaceDecision
from .throttle_config import (
    DEFAULT_BURST_LIMIT,
    DEFAULT_BURST_TIMEOUT,
    DEFAULT_RATE_LIMIT,
    ThrottleConfig,
)

__all__ = [
    "ThrottleConfig",
    "DEFAULT_BURST_LIMIT",
    "DEFAULT_RATE_LIMIT",
    "DEFAULT_BURST_TIMEOUT",
    "PaceDecision",
]
