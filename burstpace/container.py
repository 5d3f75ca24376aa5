"""Dependency container - holds all wired dependencies."""

from collections.abc import Callable
from dataclasses import dataclass

from burstpace.application.services import TransferService
from burstpace.config import Config
from burstpace.domain import DataSource, ThrottleConfig


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    Throttles are not stored here: every transfer builds its own.
    """

    # Services
    transfer_service: TransferService

    # Factories
    source_factory: Callable[[], DataSource]

    # Configuration
    config: Config
    throttle_config: ThrottleConfig

    @property
    def download_filename(self) -> str:
        return self.config.download.filename

    @property
    def content_type(self) -> str:
        return self.config.download.content_type
