"""Agno agent service for structured guide analysis.

Turns the extracted text of a build guide into an ``AnalysisResult``:
a short overview plus the components, tools and steps the guide mentions.

Architecture Decisions:

1. **Structured output** - The agent is created with ``output_schema`` so the
   model is asked for JSON matching ``AnalysisResult``. Agno may still hand back
   a raw string when the reply does not parse, so every reply is validated
   again here before it leaves the service.

2. **Singleton Pattern** - Agent initialization builds the model client once.
   The singleton reuses the same agent for every analysis.

3. **Lazy credentials** - A missing API key is reported as
   ``AnalysisUnavailableError`` on the first analysis instead of at import,
   so the UI still loads and can show the problem to the user.

4. **No history** - Each analysis is independent; no session storage or
   knowledge base is attached to the agent.
"""

import json
import logging

from agno.agent import Agent
from agno.models.openai import OpenAIChat
from pydantic import BaseModel, ValidationError

from guide_analyzer.agent.config import AnalyzerConfig, get_analyzer_config
from guide_analyzer.errors import (
    AnalysisMalformedResponseError,
    AnalysisServiceError,
    AnalysisUnavailableError,
)
from guide_analyzer.models.schemas import AnalysisResult

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Analyze the following guide (most likely an FPV drone build guide). \
Extract the key information and return it as JSON. Write all values in {language}.

Text to analyze:
---
{text}
---
"""


def _strip_code_fence(raw: str) -> str:
    """Remove a surrounding markdown code fence from a JSON reply."""
    stripped = raw.strip()
    if stripped.startswith("```") and stripped.endswith("```"):
        stripped = stripped[3:-3]
        if stripped.startswith("json"):
            stripped = stripped[4:]
    return stripped.strip()


def parse_analysis_content(content: object) -> AnalysisResult:
    """Validate an agent reply as an AnalysisResult.

    Args:
        content: Reply content from the agent: a model instance, dict or JSON string.

    Returns:
        The validated analysis result.

    Raises:
        AnalysisMalformedResponseError: If the reply is empty, not JSON,
            or does not match the expected schema.
    """
    if isinstance(content, AnalysisResult):
        return content

    if content is None or (isinstance(content, str) and not content.strip()):
        raise AnalysisMalformedResponseError("Received an empty response from the analysis service.")

    if isinstance(content, BaseModel):
        content = content.model_dump()

    if isinstance(content, str):
        try:
            content = json.loads(_strip_code_fence(content))
        except json.JSONDecodeError as e:
            raise AnalysisMalformedResponseError() from e

    try:
        return AnalysisResult.model_validate(content)
    except ValidationError as e:
        raise AnalysisMalformedResponseError(
            "The analysis service returned data in an unexpected format."
        ) from e


class AnalyzerService:
    """Service for running structured analysis with an Agno agent.

    Wraps Agno's Agent with:
    - OpenAI (or compatible) model configured from the environment
    - JSON output validated against AnalysisResult
    - Translation of provider failures into AnalysisError subclasses
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        """Initialize the analyzer service.

        Args:
            config: Optional analyzer configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_analyzer_config()
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with OpenAI model and AnalysisResult output schema.
        """
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            description="An assistant that summarizes technical build guides.",
            instructions=[
                "Write the overview in 2-4 sentences.",
                "List the main components required for the build.",
                "List the tools required for the build.",
                "Describe the main build steps briefly, in order.",
                "Use empty lists when the text mentions no components, tools or steps.",
            ],
            output_schema=AnalysisResult,
            # JSON mode keeps min_length constraints out of the provider's strict schema
            use_json_mode=True,
        )

    def build_prompt(self, text: str) -> str:
        """Build the analysis prompt for a guide text."""
        return PROMPT_TEMPLATE.format(language=self._config.response_language, text=text)

    async def analyze(self, text: str) -> AnalysisResult:
        """Analyze a guide text.

        Args:
            text: Extracted text of the guide.

        Returns:
            The structured analysis.

        Raises:
            AnalysisServiceError: If the model call fails.
            AnalysisMalformedResponseError: If the reply is empty or malformed.
        """
        try:
            response = await self._agent.arun(self.build_prompt(text))
        except Exception as e:
            logger.error(f"Analysis request failed: {e}")
            raise AnalysisServiceError() from e

        result = parse_analysis_content(getattr(response, "content", None))
        logger.info(
            f"Analysis complete: {len(result.components)} components, "
            f"{len(result.tools)} tools, {len(result.steps)} steps"
        )
        return result


# Module-level singleton instance
_analyzer_service: AnalyzerService | None = None


def get_analyzer_service() -> AnalyzerService:
    """Get or create the global analyzer service.

    Returns:
        The AnalyzerService instance.

    Raises:
        AnalysisUnavailableError: If no API key is configured.
    """
    global _analyzer_service
    if _analyzer_service is None:
        try:
            config = get_analyzer_config()
        except ValidationError as e:
            logger.warning("Analyzer is not configured: API key missing")
            raise AnalysisUnavailableError() from e
        _analyzer_service = AnalyzerService(config=config)
    return _analyzer_service


async def analyze_guide_text(text: str) -> AnalysisResult:
    """Analyze a guide text with the global analyzer service."""
    return await get_analyzer_service().analyze(text)
