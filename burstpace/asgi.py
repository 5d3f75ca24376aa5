"""ASGI application factory for uvicorn.

Usage:
    uvicorn burstpace.asgi:create_app_from_env --factory
"""

import os

from burstpace.composition import create_container
from burstpace.config import DEFAULT_CONFIG_PATH


def create_app_from_env():
    """Create FastAPI app from environment variables.

    This is called by uvicorn when using the --factory flag.
    Environment variables:
        BURSTPACE_CONFIG_PATH: Path to config file (default: burstpace.yaml)
    """
    from burstpace.app import create_app

    config_path = os.environ.get("BURSTPACE_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    return create_app(create_container(config_path=config_path))
