"""FastAPI application serving a throttled download."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import StreamingResponse

from . import __version__
from .composition import create_container
from .config import DEFAULT_CONFIG_PATH
from .container import Container
from .logging_setup import setup_logging_from_env

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: Pre-wired dependencies. Built from BURSTPACE_CONFIG_PATH
            at startup when omitted.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        setup_logging_from_env()
        if getattr(app.state, "container", None) is None:
            config_path = os.environ.get("BURSTPACE_CONFIG_PATH", DEFAULT_CONFIG_PATH)
            app.state.container = create_container(config_path=config_path)
        logger.info("burstpace server started")

        yield

        # Shutdown
        logger.info("burstpace server stopped")

    app = FastAPI(
        title="burstpace",
        description="File download with burst and sustained bandwidth limits",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        container: Container = app.state.container
        throttle = container.transfer_service.throttle_config
        return {
            "status": "healthy",
            "throttle": {
                "enabled": throttle.enabled,
                "burst_limit": throttle.burst_limit,
                "rate_limit": throttle.rate_limit,
                "burst_timeout": throttle.burst_timeout,
            },
        }

    @app.get("/download")
    async def download(request: Request):
        """Stream the configured file through a fresh throttle."""
        container: Container = app.state.container
        source = container.source_factory()

        logger.info(
            "Download started client=%s filename=%s size=%d",
            getattr(request.client, "host", None),
            container.download_filename,
            source.size,
        )

        return StreamingResponse(
            container.transfer_service.stream(source),
            media_type=container.content_type,
            headers={
                "Content-Disposition": f'attachment; filename="{container.download_filename}"',
                "Content-Length": str(source.size),
            },
        )

    return app
