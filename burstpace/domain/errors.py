"""Domain errors raised by the throttle."""


class ThrottleError(Exception):
    """Base class for throttle errors."""


class ConfigError(ThrottleError, ValueError):
    """Throttle configuration is invalid.

    Raised once, at construction. The host must fix the configuration
    and build a new throttle.
    """


class ClockError(ThrottleError, RuntimeError):
    """Monotonic clock source is unavailable."""
