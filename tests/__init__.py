"""Test package for PDF Summarizer.

Unit tests cover isolated logic; integration tests drive the API end to end.

Structure:
    - unit/: Chunker, fetcher, summary service and config tests
    - integration/: Summary endpoint through the FastAPI app

Network traffic is served by httpx.MockTransport and the Gemini client is
mocked, except for live tests gated on GEMINI_API_KEY. Leverages pytest
with pytest-check for soft assertions.
"""
