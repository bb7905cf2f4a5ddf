"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - app: Fresh FastAPI application per test
    - async_client: HTTPX client for API testing
    - document_url: Consistent document URL for tests
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pdf_summarizer.api.app import create_app


@pytest.fixture
def app() -> FastAPI:
    """Create a FastAPI application with no dependency overrides.

    Returns:
        Newly configured application instance.
    """
    return create_app()


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Args:
        app: Application under test.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def document_url() -> str:
    """Return a consistent document URL for testing.

    Returns:
        Predictable URL for test assertions.
    """
    return "https://files.example.com/handbook.pdf"
