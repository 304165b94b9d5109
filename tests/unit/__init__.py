"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: PDF validation and text extraction
    - agent/: Analyzer configuration and response parsing
    - search/: Keyword matching and highlighting
    - export/: Markdown and JSON rendering
    - pipeline/: Session state machine and connectivity

Uses fakes and mocks for the LLM and network.
"""
