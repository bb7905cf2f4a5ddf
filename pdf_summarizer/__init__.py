"""PDF Summarizer - AI-generated summaries of PDF documents.

Combines httpx for document fetching, Gemini (google-genai) for summary
generation, FastAPI for the HTTP surface, and Pydantic for data validation.

Components:
    - parsing: Document fetching and text chunking
    - agent: Gemini summary generation and configuration
    - api: HTTP endpoints
    - models: Request/response schemas
"""

__version__ = "0.1.0"
