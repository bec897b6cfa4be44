"""
Shared test configuration and fixtures for the avatar service tests.

Provides settings, a mocked outbound HTTP session and a running test client
for the aiohttp application.
"""

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock
from aiohttp import ClientResponse, ClientSession
from aiohttp.test_utils import TestClient, TestServer

from social.graze.avatar.app.config import Settings
from social.graze.avatar.app.server import start_web_server


@pytest.fixture
def settings():
    """Settings with metrics disabled and Sentry unset."""
    return Settings(debug=False, metrics_backend="none", sentry_dsn=None)


@pytest.fixture
def json_session():
    """Factory for a mocked ClientSession whose GET returns a single response."""

    def _build(status: int = 200, body=None):
        mock_session = AsyncMock(spec=ClientSession)
        mock_response = AsyncMock(spec=ClientResponse)
        mock_response.status = status
        mock_response.json.return_value = body
        mock_session.get.return_value.__aenter__.return_value = mock_response
        return mock_session, mock_response

    return _build


@pytest_asyncio.fixture
async def client(settings):
    """Running test client for the avatar application."""
    app = await start_web_server(settings)
    async with TestClient(TestServer(app)) as test_client:
        yield test_client
