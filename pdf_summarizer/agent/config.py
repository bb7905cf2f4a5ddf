"""Summary generator configuration with environment variable loading.

Pydantic-based configuration for the Gemini summary service.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

GEMINI_KEY_PREFIX = "AIza"


class SummaryConfig(BaseModel):
    """Configuration for the Gemini summary service.

    An empty API key is accepted here; the service refuses to run without
    one, so a missing key surfaces as a ConfigurationError at call time.

    Attributes:
        api_key: Gemini API key.
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_output_tokens: Maximum tokens in generated summary.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        min_length=1,
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for summary generation",
    )
    max_output_tokens: int = Field(
        default=1500,
        ge=1,
        le=65536,
        description="Maximum tokens in generated summary",
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str) -> str:
        """Strip the API key and warn when it doesn't look like a Gemini key."""
        v = v.strip()
        if v and not v.startswith(GEMINI_KEY_PREFIX):
            logger.warning("Gemini API key format doesn't match expected pattern")
        return v


def get_summary_config() -> SummaryConfig:
    """Create summary configuration from environment.

    Returns:
        Configured SummaryConfig instance.
    """
    return SummaryConfig()
