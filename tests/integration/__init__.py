"""Integration tests for components working together.

Coverage:
    - Pipeline runs with real pypdf extraction
    - FastAPI host with real HTTP requests
    - Live LLM analysis (when an API key is configured)
"""
