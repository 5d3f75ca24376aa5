"""Composition root - the ONLY place where dependencies are wired."""

import logging
from collections.abc import Callable
from pathlib import Path

from burstpace.application.services import TransferService
from burstpace.config import DEFAULT_CONFIG_PATH, Config, DownloadConfig, load_config
from burstpace.container import Container
from burstpace.domain import DataSource
from burstpace.infrastructure.sources import FileSource, RepeatedByteSource

logger = logging.getLogger(__name__)


def create_source_factory(download: DownloadConfig) -> Callable[[], DataSource]:
    """Create a factory producing a fresh content source per transfer."""
    if download.path is not None:
        path = download.path
        if not path.is_file():
            raise FileNotFoundError(f"Download file not found: {path}")

        def file_factory() -> DataSource:
            return FileSource(path, chunk_size=download.chunk_size)

        return file_factory

    fill = download.fill.encode("utf-8")

    def generated_factory() -> DataSource:
        return RepeatedByteSource(download.size, fill=fill, chunk_size=download.chunk_size)

    return generated_factory


def create_container(
    config_path: Path | str = DEFAULT_CONFIG_PATH,
    config: Config | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        config_path: Path to config file, ignored when config is given.
        config: Already loaded configuration.

    Returns:
        Fully wired dependency container.

    Raises:
        ConfigError: Throttle settings are invalid.
    """
    config = config or load_config(config_path)
    throttle_config = config.throttle.to_throttle_config()

    transfer_service = TransferService(
        throttle_config=throttle_config,
        chunk_size=config.download.chunk_size,
    )

    logger.info(
        "Throttle configured enabled=%s burst_limit=%d rate_limit=%d burst_timeout=%d",
        throttle_config.enabled,
        throttle_config.burst_limit,
        throttle_config.rate_limit,
        throttle_config.burst_timeout,
    )

    return Container(
        transfer_service=transfer_service,
        source_factory=create_source_factory(config.download),
        config=config,
        throttle_config=throttle_config,
    )
