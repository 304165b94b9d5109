"""Guide Analyzer - structured analysis of PDF build guides.

Combines pypdf for text extraction, Agno for LLM orchestration,
NiceGUI for visualization, and Pydantic for data validation.

Components:
    - parsing: PDF text extraction
    - agent: Structured analysis of guide text with an LLM
    - search: Keyword matching and highlighting over extracted text
    - pipeline: Document session state machine and connectivity gate
    - export: Markdown/JSON rendering, clipboard and download actions
    - ui: Web interface for upload, analysis and search
    - models: Shared data schemas
"""

__version__ = "0.1.0"
