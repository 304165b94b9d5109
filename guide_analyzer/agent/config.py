"""Analyzer configuration with environment variable loading.

Pydantic-based configuration for the Agno analysis agent.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_ANALYSIS_MODEL = "gpt-4o-mini"
DEFAULT_ANALYSIS_LANGUAGE = "Ukrainian"
MISSING_KEY_MESSAGE = (
    "Guide analysis needs an LLM API key. Set LLM_API_KEY (or OPENAI_API_KEY) in .env"
)


def _key_from_env() -> str:
    # LLM_API_KEY wins so a compatible provider can be used alongside OpenAI
    return os.getenv("LLM_API_KEY") or os.getenv("OPENAI_API_KEY") or ""


class AnalyzerConfig(BaseModel):
    """Settings for turning guide text into a structured analysis.

    Attributes:
        api_key: Credential for the analysis model.
        base_url: Endpoint of an OpenAI-compatible provider, None for OpenAI.
        model_name: Model that writes the analysis.
        temperature: Sampling temperature; kept low so lists stay factual.
        max_tokens: Upper bound on the length of the JSON reply.
        response_language: Language of the overview, lists and steps.
    """

    api_key: str = Field(default_factory=_key_from_env, description="Analysis model credential")
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="OpenAI-compatible endpoint",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL") or DEFAULT_ANALYSIS_MODEL,
        description="Model that writes the analysis",
    )
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, ge=1, le=128000)
    response_language: str = Field(
        default_factory=lambda: os.getenv("ANALYSIS_LANGUAGE") or DEFAULT_ANALYSIS_LANGUAGE,
        min_length=1,
        description="Language the analysis is written in",
    )

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        key = v.strip()
        if not key:
            raise ValueError(MISSING_KEY_MESSAGE)
        return key


def get_analyzer_config() -> AnalyzerConfig:
    """Create analyzer configuration from environment.

    Raises:
        pydantic.ValidationError: If no API key is set.
    """
    return AnalyzerConfig()
