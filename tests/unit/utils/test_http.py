"""Precise unit tests for HTTPClient.

Tests focus on session management and error mapping.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.sheets import TransportError
from laakhay.sheets.utils import HTTPClient


def mock_response(status: int = 200, text: str = "") -> AsyncMock:
    response = AsyncMock()
    response.status = status
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def mock_session(**kwargs) -> MagicMock:
    session = MagicMock()
    session.closed = False  # Important: session property checks this
    session.get = MagicMock(**kwargs)
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientGetText:
    """Test get_text() responses and error mapping."""

    @pytest.mark.asyncio
    async def test_returns_body_and_passes_headers(self):
        client = HTTPClient()
        client._session = mock_session(return_value=mock_response(text="body"))

        text = await client.get_text("https://example.com/tq?tq=a%20b", headers={"X": "1"})

        assert text == "body"
        call_args = client._session.get.call_args
        assert str(call_args.args[0]) == "https://example.com/tq?tq=a%20b"
        assert call_args.kwargs["headers"] == {"X": "1"}

    @pytest.mark.asyncio
    async def test_url_is_not_re_encoded(self):
        """Percent-escapes built by the transport reach the wire unchanged."""
        client = HTTPClient()
        client._session = mock_session(return_value=mock_response())

        await client.get_text("https://example.com/tq?tq=%27x%27")

        assert "%27x%27" in str(client._session.get.call_args.args[0])

    @pytest.mark.asyncio
    async def test_non_200_raises_transport_error(self):
        client = HTTPClient()
        client._session = mock_session(return_value=mock_response(status=404))

        with pytest.raises(TransportError) as exc_info:
            await client.get_text("https://example.com/tq")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_client_error_raises_transport_error(self):
        client = HTTPClient()
        client._session = mock_session(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.get_text("https://example.com/tq")
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        client = HTTPClient()
        client._session = mock_session(side_effect=asyncio.TimeoutError())

        with pytest.raises(TransportError, match="timed out"):
            await client.get_text("https://example.com/tq")
