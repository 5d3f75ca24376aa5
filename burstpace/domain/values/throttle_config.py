"""Throttle configuration value object."""

from dataclasses import dataclass

from ..errors import ConfigError

# Defaults taken from the classic download example
DEFAULT_BURST_LIMIT = 50_000  # bytes per second
DEFAULT_RATE_LIMIT = 15_000  # bytes per second
DEFAULT_BURST_TIMEOUT = 30  # seconds


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class ThrottleConfig:
    """Two-phase rate policy (value object).

    burst_limit applies for the first burst_timeout seconds of a transfer,
    rate_limit for the rest of it. A disabled config lets every byte pass
    and is never validated.
    """

    enabled: bool = True
    burst_limit: int = DEFAULT_BURST_LIMIT
    rate_limit: int = DEFAULT_RATE_LIMIT
    burst_timeout: int = DEFAULT_BURST_TIMEOUT

    def __post_init__(self) -> None:
        if not self.enabled:
            return
        for name in ("burst_limit", "rate_limit", "burst_timeout"):
            if not _is_int(getattr(self, name)):
                raise ConfigError(f"{name} must be an integer")
        if self.burst_limit <= 0:
            raise ConfigError("burst_limit must be positive")
        if self.rate_limit <= 0:
            raise ConfigError("rate_limit must be positive")
        if self.burst_timeout < 0:
            raise ConfigError("burst_timeout must not be negative")

    @classmethod
    def disabled(cls) -> "ThrottleConfig":
        """Passthrough config."""
        return cls(enabled=False)

    def active_rate(self, elapsed: float) -> int:
        """Rate in bytes/second for a transfer that started `elapsed` seconds ago."""
        if elapsed < self.burst_timeout:
            return self.burst_limit
        return self.rate_limit
