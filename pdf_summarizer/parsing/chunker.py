"""Text chunking for oversized document text.

Splits text into bounded-size pieces along paragraph, then sentence,
boundaries so each piece fits in a single summary request.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Constants
DEFAULT_MAX_CHUNK_SIZE = 600_000
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"[.!?]+")


def _pack(pieces: list[str], separator: str, max_chunk_size: int) -> list[str]:
    """Greedily pack pieces into chunks no larger than max_chunk_size.

    Each piece is stripped and re-terminated with separator. A piece that
    would overflow the running buffer starts a new buffer; a piece larger
    than the limit on its own becomes its own oversized chunk.
    """
    chunks: list[str] = []
    current = ""

    for piece in pieces:
        terminated = piece.strip() + separator

        if len(current) + len(terminated) > max_chunk_size:
            if current.strip():
                chunks.append(current.strip())
            current = terminated
        else:
            current += terminated

    if current.strip():
        chunks.append(current.strip())

    return chunks


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Split text into ordered chunks of at most max_chunk_size characters.

    Text that already fits is returned unmodified as a single chunk.
    Otherwise paragraphs (blank-line separated) are packed first; any chunk
    still over the limit is repacked by sentence. A sentence is never split,
    so a single sentence longer than the limit comes back as one oversized
    chunk.

    Args:
        text: Document text to split.
        max_chunk_size: Maximum chunk length in characters.

    Returns:
        Non-empty chunks in document order.

    Raises:
        ValueError: If max_chunk_size is not positive.
    """
    if max_chunk_size <= 0:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")

    if len(text) <= max_chunk_size:
        return [text]

    paragraphs = [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]
    chunks = _pack(paragraphs, "\n\n", max_chunk_size)

    final_chunks: list[str] = []
    for chunk in chunks:
        if len(chunk) <= max_chunk_size:
            final_chunks.append(chunk)
            continue

        sentences = [s for s in _SENTENCE_END.split(chunk) if s.strip()]
        final_chunks.extend(_pack(sentences, ". ", max_chunk_size))

    oversized = sum(1 for c in final_chunks if len(c) > max_chunk_size)
    if oversized:
        logger.warning(
            f"{oversized} chunk(s) exceed {max_chunk_size} characters "
            "because a single sentence is longer than the limit"
        )

    return final_chunks
