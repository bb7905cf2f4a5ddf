"""Summary endpoint for PDF documents.

Handles document fetching, chunking, and per-chunk summary generation.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from pdf_summarizer.agent.summarizer import (
    ConfigurationError,
    EmptyInputError,
    EmptyResponseError,
    SummaryService,
    get_summary_service,
)
from pdf_summarizer.models.schemas import ErrorResponse, SummaryRequest, SummaryResponse
from pdf_summarizer.parsing.fetcher import (
    EmptyDocumentError,
    ExtractionError,
    FetchError,
    PDFExtractionError,
    fetch_and_extract_text,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])

SUMMARY_SEPARATOR = "\n\n---\n\n"

DocumentFetcher = Callable[[str], Awaitable[list[str]]]


def get_document_fetcher() -> DocumentFetcher:
    """Return the coroutine used to fetch and chunk documents."""
    return fetch_and_extract_text


def _extraction_status(error: PDFExtractionError) -> int:
    """Map a document extraction failure to an HTTP status code.

    Args:
        error: The failure raised by the fetcher.

    Returns:
        422 when the document was reachable but unusable, 502 otherwise.
    """
    if isinstance(error, (EmptyDocumentError, ExtractionError)):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_502_BAD_GATEWAY


async def _fetch_chunks(fetch: DocumentFetcher, url: str) -> list[str]:
    try:
        return await fetch(url)
    except FetchError as e:
        logger.warning(f"Document source returned {e.status_code} for {url}")
        raise HTTPException(status_code=_extraction_status(e), detail=str(e)) from e
    except PDFExtractionError as e:
        logger.warning(f"Text extraction failed for {url}: {e}")
        raise HTTPException(status_code=_extraction_status(e), detail=str(e)) from e


async def _summarize_chunks(
    service: SummaryService,
    chunks: list[str],
    custom_instructions: str | None,
) -> list[str]:
    """Summarize chunks one at a time, in document order.

    Raises:
        HTTPException: 503 if the service is not configured, 422 for empty
            text, 502 for any failure reported by the AI service.
    """
    summaries: list[str] = []

    for index, chunk in enumerate(chunks, start=1):
        logger.info(f"Summarizing chunk {index}/{len(chunks)}")
        try:
            summaries.append(await service.generate_summary(chunk, custom_instructions))
        except ConfigurationError as e:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=str(e),
            ) from e
        except EmptyInputError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            ) from e
        except EmptyResponseError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=str(e),
            ) from e
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Summary generation failed: {e}",
            ) from e

    return summaries


@router.post(
    "",
    response_model=SummaryResponse,
    responses={
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def create_summary(
    request: SummaryRequest,
    fetch: Annotated[DocumentFetcher, Depends(get_document_fetcher)],
    service: Annotated[SummaryService, Depends(get_summary_service)],
) -> SummaryResponse:
    """Fetch a PDF by URL and summarize it.

    The document text is chunked to fit the model's input limit; each chunk
    is summarized separately and the results are joined in order.

    Args:
        request: Document URL and optional custom instructions.

    Returns:
        SummaryResponse with per-chunk and combined summaries.

    Raises:
        422: Document or text is empty or unusable.
        502: Document source or AI service failure.
        503: Gemini API key not configured.
    """
    chunks = await _fetch_chunks(fetch, request.url)

    summaries = await _summarize_chunks(service, chunks, request.custom_instructions)
    logger.info(f"Summarized {request.url} in {len(chunks)} chunk(s)")

    return SummaryResponse(
        url=request.url,
        chunk_count=len(chunks),
        summaries=summaries,
        summary=SUMMARY_SEPARATOR.join(summaries),
    )
