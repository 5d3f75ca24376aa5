"""Configuration loading and validation using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from burstpace.domain import (
    DEFAULT_BURST_LIMIT,
    DEFAULT_BURST_TIMEOUT,
    DEFAULT_RATE_LIMIT,
    ThrottleConfig,
)
from burstpace.infrastructure.config import YAMLConfigLoader

DEFAULT_CONFIG_PATH = "burstpace.yaml"


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class ThrottleSettings(BaseModel):
    """Throttle settings as written in the config file.

    Range checks live in ThrottleConfig, since a disabled throttle
    accepts any values.
    """

    enabled: bool = True
    burst_limit: int = DEFAULT_BURST_LIMIT
    rate_limit: int = DEFAULT_RATE_LIMIT
    burst_timeout: int = DEFAULT_BURST_TIMEOUT

    def to_throttle_config(self) -> ThrottleConfig:
        """Build the domain config. Raises ConfigError when invalid."""
        return ThrottleConfig(
            enabled=self.enabled,
            burst_limit=self.burst_limit,
            rate_limit=self.rate_limit,
            burst_timeout=self.burst_timeout,
        )


class DownloadConfig(BaseModel):
    """Download served by the HTTP host."""

    filename: str = "test.txt"
    content_type: str = "application/force-download"
    # Generated content, used when path is not set
    size: int = Field(default=60_000_000, ge=0)
    fill: str = "A"
    path: Path | None = None
    chunk_size: int = Field(default=65536, ge=1)

    @field_validator("fill")
    @classmethod
    def validate_fill(cls, v: str) -> str:
        """Fill pattern must produce bytes."""
        if not v:
            raise ValueError("fill must not be empty")
        return v

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Reject names that would break the Content-Disposition header."""
        if not v or any(c in v for c in '"\r\n/\\'):
            raise ValueError(f"Invalid download filename: {v!r}")
        return v


class Config(BaseModel):
    """Application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    throttle: ThrottleSettings = Field(default_factory=ThrottleSettings)
    download: DownloadConfig = Field(default_factory=DownloadConfig)


def load_config(config_path: Path | str = DEFAULT_CONFIG_PATH) -> Config:
    """Load configuration from YAML file."""
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)
