"""Pipeline configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _default_probe_url() -> str:
    return (
        os.getenv("CONNECTIVITY_PROBE_URL")
        or os.getenv("LLM_BASE_URL")
        or "https://api.openai.com"
    )


class PipelineConfig(BaseModel):
    """Settings for the document pipeline and its connectivity gate.

    Attributes:
        min_text_length: Texts of this length or shorter are not analyzed.
        probe_url: URL requested to decide whether the analyzer is reachable.
        probe_timeout: Seconds to wait for the connectivity probe.
    """

    min_text_length: int = Field(
        default_factory=lambda: int(os.getenv("MIN_TEXT_LENGTH", "50")),
        ge=0,
    )
    probe_url: str = Field(default_factory=_default_probe_url)
    probe_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CONNECTIVITY_TIMEOUT", "5")),
        gt=0,
    )


def get_pipeline_config() -> PipelineConfig:
    """Create pipeline configuration from environment."""
    return PipelineConfig()
