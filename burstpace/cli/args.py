"""Command line argument parsing."""

import argparse

from burstpace import __version__
from burstpace.config import DEFAULT_CONFIG_PATH


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - config: Path to the YAML config file
        - host / port: Override the configured bind address
        - output: Write the download to this file instead of serving it
        - verbose: Whether to show detailed logs
    """
    parser = argparse.ArgumentParser(
        prog="burstpace",
        description="burstpace - Throttled file downloads with a burst phase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (overrides config)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port (overrides config)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the throttled download to FILE and exit instead of serving",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )

    return parser.parse_args(argv)
