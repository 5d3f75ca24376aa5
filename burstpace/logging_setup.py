"""Logging configuration."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_ENV = "BURSTPACE_LOG_LEVEL"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def setup_logging_from_env() -> None:
    """Configure logging from BURSTPACE_LOG_LEVEL (default INFO).

    Leaves an already configured root logger alone unless the variable is set.
    """
    level = os.environ.get(LOG_LEVEL_ENV)
    if level is None and logging.getLogger().handlers:
        return
    setup_logging(level or "INFO")
