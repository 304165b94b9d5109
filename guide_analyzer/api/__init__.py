"""FastAPI host for the Guide Analyzer UI.

Endpoints:
    - GET /health: Service health and connectivity status
    - GET /: Analyzer page (mounted by NiceGUI at startup)
"""

from guide_analyzer.api.app import app, create_app

__all__ = ["app", "create_app"]
