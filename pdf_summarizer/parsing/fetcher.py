"""Document fetching module using httpx.

Downloads a PDF from a URL, validates the response, and retrieves a
plain-text rendition of the same URL for chunking.
"""

import logging

import httpx

from pdf_summarizer.parsing.chunker import DEFAULT_MAX_CHUNK_SIZE, chunk_text

logger = logging.getLogger(__name__)

# Constants
PDF_CONTENT_TYPE = "application/pdf"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
PDF_HEADERS = {
    "Accept": PDF_CONTENT_TYPE,
    "User-Agent": USER_AGENT,
    "Cache-Control": "no-cache",
}
TEXT_HEADERS = {
    "Accept": f"text/plain,{PDF_CONTENT_TYPE}",
    "User-Agent": USER_AGENT,
}


class PDFExtractionError(Exception):
    """Raised when a document cannot be fetched or turned into text.

    Attributes:
        message: The originating failure, without the common prefix.
    """

    def __init__(self, message: str) -> None:
        self.message = message or "Unknown error"
        super().__init__(f"Failed to extract PDF text: {self.message}")


class FetchError(PDFExtractionError):
    """Raised when the document source answers with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch PDF: {status_code} {reason}".rstrip())


class EmptyDocumentError(PDFExtractionError):
    """Raised when the downloaded document has no bytes."""

    pass


class ExtractionError(PDFExtractionError):
    """Raised when no usable text can be obtained for the document."""

    pass


def _check_pdf_response(response: httpx.Response) -> bytes:
    """Validate the PDF download and return its body.

    Args:
        response: Response to the PDF request.

    Returns:
        Raw document bytes.

    Raises:
        FetchError: If the status is not successful.
        EmptyDocumentError: If the body is empty.
    """
    if not response.is_success:
        raise FetchError(response.status_code, response.reason_phrase)

    content_type = response.headers.get("content-type")
    logger.info(f"Response content type: {content_type}")

    if not content_type or PDF_CONTENT_TYPE not in content_type:
        logger.warning(f"Response doesn't appear to be a PDF. Content-Type: {content_type}")

    content = response.content
    logger.info(f"PDF downloaded, size: {len(content)} bytes")

    if not content:
        raise EmptyDocumentError("Downloaded PDF is empty")

    return content


async def _extract_text(
    client: httpx.AsyncClient,
    url: str,
    max_chunk_size: int,
) -> list[str]:
    response = await client.get(url, headers=PDF_HEADERS)
    _check_pdf_response(response)

    # Text rendition comes from a second request, not from the PDF bytes
    text_response = await client.get(url, headers=TEXT_HEADERS)

    if text_response.is_success:
        text = text_response.text
        if text.strip():
            logger.info(f"Text extracted successfully, length: {len(text)}")

            chunks = chunk_text(text, max_chunk_size)
            logger.info(f"Text chunked into {len(chunks)} chunks")
            return chunks

    raise ExtractionError(
        "Unable to extract text from PDF. The file might be image-only, "
        "corrupted, or in an unsupported format."
    )


async def fetch_and_extract_text(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
) -> list[str]:
    """Fetch a PDF by URL and return its text as ordered chunks.

    Args:
        url: Location of the PDF document.
        client: Optional HTTP client. A short-lived client without a timeout
                is created when not provided.
        max_chunk_size: Maximum chunk length passed to the chunker.

    Returns:
        Text chunks in document order.

    Raises:
        PDFExtractionError: On any failure. FetchError, EmptyDocumentError
            and ExtractionError identify the specific cause; transport
            errors are wrapped with the original as __cause__.
    """
    logger.info(f"Attempting to fetch PDF from: {url}")

    try:
        if client is not None:
            return await _extract_text(client, url, max_chunk_size)

        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as own_client:
            return await _extract_text(own_client, url, max_chunk_size)

    except PDFExtractionError as e:
        logger.error(f"Error extracting PDF text: {e}")
        raise
    except Exception as e:
        logger.error(f"Error extracting PDF text: {e!r}")
        raise PDFExtractionError(str(e)) from e
