"""Document fetching and text chunking.

Turns a document URL into ordered text chunks ready for summarization.

Responsibilities:
    - PDF download with status and content validation
    - Plain-text rendition retrieval
    - Paragraph/sentence chunking bounded by a character limit

The PDF binary itself is never parsed; text comes from the document source.
"""

from pdf_summarizer.parsing.chunker import DEFAULT_MAX_CHUNK_SIZE, chunk_text
from pdf_summarizer.parsing.fetcher import (
    EmptyDocumentError,
    ExtractionError,
    FetchError,
    PDFExtractionError,
    fetch_and_extract_text,
)

__all__ = [
    "DEFAULT_MAX_CHUNK_SIZE",
    "EmptyDocumentError",
    "ExtractionError",
    "FetchError",
    "PDFExtractionError",
    "chunk_text",
    "fetch_and_extract_text",
]
