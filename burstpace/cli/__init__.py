"""Command line interface."""

from .args import parse_args
from .display import display_startup_screen, display_transfer_result

__all__ = [
    "parse_args",
    "display_startup_screen",
    "display_transfer_result",
]
