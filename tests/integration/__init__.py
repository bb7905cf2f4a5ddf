"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests through ASGITransport
    - Fetcher, chunker and summary service wired through the real routes
    - Error mapping from fetch and summary failures to HTTP responses
    - Live Gemini summary (when configured)

The document source and Gemini client are substituted through FastAPI
dependency overrides. Requires GEMINI_API_KEY for live tests.
"""
