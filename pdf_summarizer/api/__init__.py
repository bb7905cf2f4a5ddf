"""FastAPI endpoints for the PDF summarizer.

Thin HTTP layer over document fetching and summary generation. Translates
fetch and summary failures into HTTP error responses.

Endpoints:
    - GET /health: Service health status
    - POST /summaries: Fetch a PDF by URL and summarize it
"""

from pdf_summarizer.api.app import app, create_app

__all__ = ["app", "create_app"]
