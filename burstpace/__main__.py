"""Entry point: serve the throttled download, or write it to a file."""

import logging
import sys

from pydantic import ValidationError

from burstpace.cli import display_startup_screen, display_transfer_result, parse_args
from burstpace.composition import create_container
from burstpace.domain import ConfigError
from burstpace.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        container = create_container(config_path=args.config)
    except (ConfigError, ValidationError, ValueError, OSError) as e:
        logger.error("Invalid configuration in %s: %s", args.config, e)
        return 2

    if args.output:
        display_startup_screen(container.throttle_config)
        source = container.source_factory()
        try:
            with open(args.output, "wb") as sink:
                result = container.transfer_service.copy(source, sink)
        except OSError as e:
            logger.error("Transfer to %s failed: %s", args.output, e)
            return 1
        display_transfer_result(result, args.output)
        return 0

    import uvicorn

    from burstpace.app import create_app

    host = args.host or container.config.server.host
    port = args.port or container.config.server.port
    display_startup_screen(container.throttle_config, f"http://{host}:{port}/download")
    uvicorn.run(create_app(container), host=host, port=port, log_level="warning")
    return 0


if __name__ == "__main__":
    sys.exit(main())
