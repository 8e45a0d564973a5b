"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bookofrecords.core.dependencies import get_book_service
from bookofrecords.main import app
from bookofrecords.services.book_service import BookOfRecordsService


@pytest.fixture
async def client(mock_db, settings):
    """
    HTTP client for testing API endpoints.

    Overrides the book service dependency with the mocked database.
    """
    app.dependency_overrides[get_book_service] = lambda: BookOfRecordsService(mock_db, settings)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
