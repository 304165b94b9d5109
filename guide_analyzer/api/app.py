"""FastAPI application factory.

Hosts the NiceGUI analyzer page and a health probe. All document work
happens in the UI session; there are no document endpoints.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from guide_analyzer import __version__
from guide_analyzer.pipeline.connectivity import get_connectivity_monitor

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting Guide Analyzer...")
    await get_connectivity_monitor().refresh()
    yield
    # Shutdown
    logger.info("Shutting down Guide Analyzer...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Guide Analyzer",
        description=(
            "Structured analysis of PDF build guides. Extracts document text, "
            "summarizes components, tools and build steps with an LLM, and "
            "offers full-text search with highlighting."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str | bool]:
        """Check service health status."""
        return {
            "status": "healthy",
            "service": "guide-analyzer",
            "online": get_connectivity_monitor().is_online,
        }

    return application


app = create_app()
