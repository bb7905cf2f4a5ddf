"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - SummaryRequest: Document URL and optional custom instructions
    - SummaryResponse: Per-chunk and combined summaries
    - ErrorResponse: Error detail payload
"""

from pdf_summarizer.models.schemas import ErrorResponse, SummaryRequest, SummaryResponse

__all__ = ["ErrorResponse", "SummaryRequest", "SummaryResponse"]
