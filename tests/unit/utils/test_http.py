"""
Tests for utils.http module (HttpxTransport).
Use the mock_http_client fixture to stub httpx.AsyncClient; simulate statuses and faults.
"""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from data.base import TransportError
from utils.http import HttpResponse, HttpxTransport


class TestHttpxTransport:
    """Test HttpxTransport.get"""

    @pytest.mark.asyncio
    async def test_returns_status_and_raw_body(self, mock_http_client):
        mock_response = Mock(status_code=200, content=b'{"c": 1.0}')

        call_count = 0
        async def mock_get(*args, **kwargs):
            nonlocal call_count
            call_count += 1
            return mock_response

        mock_http_client(mock_get)

        result = await HttpxTransport(timeout=10).get("https://example.com/api?token=x")

        assert result == HttpResponse(status_code=200, body=b'{"c": 1.0}')
        assert call_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [204, 401, 404, 429, 500, 503])
    async def test_does_not_interpret_status(self, mock_http_client, status):
        """Status classification belongs to the caller, not the transport"""
        mock_response = Mock(status_code=status, content=b"whatever")

        async def mock_get(*args, **kwargs):
            return mock_response

        mock_http_client(mock_get)

        result = await HttpxTransport().get("https://example.com/api")

        assert result.status_code == status
        assert result.body == b"whatever"

    @pytest.mark.asyncio
    async def test_forwards_url_and_timeout(self, mock_http_client):
        async def mock_get(*args, **kwargs):
            return Mock(status_code=200, content=b"[]")

        client = mock_http_client(mock_get)

        await HttpxTransport(timeout=7.5).get("https://example.com/quote?symbol=AAPL")

        client.get.assert_awaited_once_with("https://example.com/quote?symbol=AAPL", timeout=7.5)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self, mock_http_client):
        async def mock_get(*args, **kwargs):
            raise httpx.ReadTimeout("read timed out")

        mock_http_client(mock_get)

        with pytest.raises(TransportError) as exc_info:
            await HttpxTransport(timeout=3).get("https://example.com/api")

        assert "timed out" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_connect_error_raises_transport_error(self, mock_http_client):
        async def mock_get(*args, **kwargs):
            raise httpx.ConnectError("connection refused")

        mock_http_client(mock_get)

        with pytest.raises(TransportError) as exc_info:
            await HttpxTransport().get("https://example.com/api")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_injected_client_is_reused_and_not_closed(self):
        client = Mock(is_closed=False)
        client.get = AsyncMock(return_value=Mock(status_code=200, content=b"{}"))
        client.aclose = AsyncMock()
        transport = HttpxTransport(timeout=5, client=client)

        await transport.get("https://example.com/a")
        await transport.get("https://example.com/b")

        assert client.get.await_count == 2
        client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_closed_injected_client_raises_transport_error(self):
        client = httpx.AsyncClient()
        await client.aclose()
        transport = HttpxTransport(client=client)

        with pytest.raises(TransportError, match="client is closed"):
            await transport.get("https://example.com/api")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError, match="timeout must be > 0"):
            HttpxTransport(timeout=0)
