"""Project-wide pytest fixtures and utilities."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from config.providers.finnhub import FinnhubSettings
from data.providers.finnhub import FinnhubClient
from utils.http import HttpResponse
from utils.replay import ReplayTransport

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "finnhub"


@pytest.fixture
def finnhub_test_settings() -> FinnhubSettings:
    return FinnhubSettings(api_key="test_key")


@pytest.fixture
def stub_transport():
    """Provide a factory for a transport that returns a fixed status/body."""

    def _create(status_code: int = 200, body: bytes | str = b"{}"):
        if isinstance(body, str):
            body = body.encode("utf-8")
        transport = Mock()
        transport.get = AsyncMock(return_value=HttpResponse(status_code=status_code, body=body))
        return transport

    return _create


@pytest.fixture
def replay_client(finnhub_test_settings) -> FinnhubClient:
    """Client that serves responses from the recorded fixtures in tests/fixtures."""
    return FinnhubClient(finnhub_test_settings, transport=ReplayTransport(FIXTURE_DIR))


@pytest.fixture
def mock_http_client(monkeypatch):
    """Provide a factory that returns a mocked httpx.AsyncClient."""

    def _create_mock_client(mock_get_func):
        # Create the fake client
        mock_client = Mock()
        mock_client.get = AsyncMock(side_effect=mock_get_func)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)

        # Replace httpx.AsyncClient with our fake (accept arbitrary init kwargs)
        monkeypatch.setattr(httpx, "AsyncClient", lambda *args, **kwargs: mock_client)
        return mock_client

    return _create_mock_client
