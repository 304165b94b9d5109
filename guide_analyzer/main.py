"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the analyzer interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from guide_analyzer.api.app import create_app
    from guide_analyzer.ui.analyzer_page import analyzer_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Guide Analyzer",
        favicon="📘",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "guide-analyzer-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting Guide Analyzer on http://localhost:{port}")
    logger.info(f"Health check available at http://localhost:{port}/health")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
