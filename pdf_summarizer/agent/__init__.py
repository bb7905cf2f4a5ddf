"""Gemini summary generation.

Turns extracted document text into a markdown summary.

Responsibilities:
    - Configuration loading for the Gemini API
    - Text normalization and token estimation
    - Prompt assembly with optional custom instructions
    - Single-turn generate_content calls with fixed parameters

Maintains clean separation from the HTTP layer.
"""

from pdf_summarizer.agent.config import SummaryConfig, get_summary_config
from pdf_summarizer.agent.summarizer import (
    ConfigurationError,
    EmptyInputError,
    EmptyResponseError,
    SummaryError,
    SummaryService,
    build_prompt,
    estimate_token_count,
    get_summary_service,
)

__all__ = [
    "ConfigurationError",
    "EmptyInputError",
    "EmptyResponseError",
    "SummaryConfig",
    "SummaryError",
    "SummaryService",
    "build_prompt",
    "estimate_token_count",
    "get_summary_config",
    "get_summary_service",
]
