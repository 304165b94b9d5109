"""Agno agent logic for structured guide analysis.

Responsibilities:
    - Agent initialization with OpenAI models
    - Prompting for overview, components, tools and build steps
    - Validation of the structured reply

Leverages the Agno framework for model access.
Maintains clean separation from the pipeline and UI layers.
"""

from guide_analyzer.agent.analyzer import (
    AnalyzerService,
    analyze_guide_text,
    get_analyzer_service,
    parse_analysis_content,
)
from guide_analyzer.agent.config import AnalyzerConfig, get_analyzer_config

__all__ = [
    "AnalyzerConfig",
    "AnalyzerService",
    "analyze_guide_text",
    "get_analyzer_config",
    "get_analyzer_service",
    "parse_analysis_content",
]
