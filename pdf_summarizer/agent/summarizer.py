"""Gemini summary service for extracted document text.

Core module for turning document text into a markdown summary.

Behaviour:

1. **Injected configuration** - The service takes a SummaryConfig and,
   optionally, a ready genai.Client at construction.

2. **Checks before the network** - A missing API key or empty input raises
   before the Gemini client is built or called.

3. **Single turn, no retry** - Each summary is one generate_content call.
   Service and transport errors are logged and re-raised unchanged.
"""

import logging
import math
import re

from google import genai
from google.genai import types

from pdf_summarizer.agent.config import SummaryConfig, get_summary_config
from pdf_summarizer.agent.prompts import (
    CUSTOM_INSTRUCTIONS_TEMPLATE,
    SUMMARY_SYSTEM_PROMPT,
    TRANSFORM_DIRECTIVE,
)

logger = logging.getLogger(__name__)

# Gemini accepts roughly 1M input tokens
TOKEN_WARNING_THRESHOLD = 800_000
_WHITESPACE_RUN = re.compile(r"\s{2,}")


class SummaryError(Exception):
    """Base class for summary generation failures."""

    pass


class ConfigurationError(SummaryError):
    """Raised when the Gemini API key is not configured."""

    pass


class EmptyInputError(SummaryError):
    """Raised when there is no text left to summarize after normalization."""

    pass


class EmptyResponseError(SummaryError):
    """Raised when Gemini returns no extractable text."""

    pass


def estimate_token_count(text: str) -> int:
    """Approximate the token count as one token per four characters."""
    return math.ceil(len(text) / 4)


def normalize_text(text: str) -> str:
    """Collapse runs of whitespace to a single space and strip the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def build_prompt(text: str, custom_instructions: str | None = None) -> str:
    """Assemble the summary prompt.

    Args:
        text: Normalized document text.
        custom_instructions: Optional user instructions, included verbatim
                             when they contain anything besides whitespace.

    Returns:
        The full prompt string.
    """
    prompt = SUMMARY_SYSTEM_PROMPT

    if custom_instructions and custom_instructions.strip():
        prompt += CUSTOM_INSTRUCTIONS_TEMPLATE.format(instructions=custom_instructions)

    return prompt + TRANSFORM_DIRECTIVE + text


def _extract_text(response: types.GenerateContentResponse) -> str | None:
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        return None

    parts = candidates[0].content.parts or []
    if not parts:
        return None

    return parts[0].text or None


class SummaryService:
    """Service for generating document summaries with Gemini.

    Wraps the google-genai client with:
    - Credential and input validation ahead of any network call
    - Prompt assembly with optional custom instructions
    - Fixed generation parameters from SummaryConfig
    - Centralized error logging
    """

    def __init__(
        self,
        config: SummaryConfig | None = None,
        client: genai.Client | None = None,
    ) -> None:
        """Initialize the summary service.

        Args:
            config: Optional summary configuration.
                    Loads from environment if not provided.
            client: Optional Gemini client. Created on first use from the
                    configured API key when not provided.
        """
        self._config = config or get_summary_config()
        self._client = client

    def _get_client(self) -> genai.Client:
        """Return the Gemini client, creating it on first use."""
        if self._client is None:
            self._client = genai.Client(api_key=self._config.api_key)
        return self._client

    async def generate_summary(
        self,
        text: str,
        custom_instructions: str | None = None,
    ) -> str:
        """Generate a markdown summary for document text.

        Args:
            text: Extracted document text, whole or a single chunk.
            custom_instructions: Optional instructions appended to the prompt.

        Returns:
            The summary text exactly as returned by Gemini.

        Raises:
            ConfigurationError: If no API key is configured.
            EmptyInputError: If the text is empty after normalization.
            EmptyResponseError: If Gemini returns no text.
        """
        if not self._config.api_key:
            raise ConfigurationError("GEMINI_API_KEY environment variable is not set")

        cleaned = normalize_text(text)
        if not cleaned:
            raise EmptyInputError("PDF text is empty, cannot generate summary")

        estimated_tokens = estimate_token_count(cleaned)
        logger.info(f"Estimated token count: {estimated_tokens}")
        if estimated_tokens > TOKEN_WARNING_THRESHOLD:
            logger.warning("Text is very long, may need further chunking")

        logger.info(f"Generating summary for PDF text of length: {len(cleaned)}")
        if custom_instructions:
            logger.info(f"Using custom instructions: {custom_instructions}")

        prompt = build_prompt(cleaned, custom_instructions)

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self._config.model_name,
                contents=[{"role": "user", "parts": [{"text": prompt}]}],
                config=types.GenerateContentConfig(
                    temperature=self._config.temperature,
                    max_output_tokens=self._config.max_output_tokens,
                ),
            )
        except Exception as e:
            logger.error(f"Gemini API error: {e!r}")
            raise

        summary = _extract_text(response)
        if summary is None:
            logger.error("Gemini API error: empty response")
            raise EmptyResponseError("Empty response from Gemini API")

        logger.info(f"Summary generated successfully, length: {len(summary)}")
        return summary


# Module-level singleton instance
_summary_service: SummaryService | None = None


def get_summary_service() -> SummaryService:
    """Get or create the global summary service.

    Returns:
        The SummaryService instance.
    """
    global _summary_service
    if _summary_service is None:
        _summary_service = SummaryService()
    return _summary_service
