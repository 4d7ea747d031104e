"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp
from yarl import URL

from ..config import DEFAULT_TIMEOUT
from ..core.exceptions import TransportError


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get_text(self, url: str, headers: Optional[dict[str, str]] = None) -> str:
        """GET an already-encoded URL and return the body as text.

        Raises:
            TransportError: On network errors, timeouts and non-200 responses
        """
        try:
            async with self.session.get(URL(url, encoded=True), headers=headers) as response:
                if response.status != 200:
                    raise TransportError(
                        f"Request failed with status {response.status}",
                        status_code=response.status,
                    )
                return await response.text()
        except aiohttp.ClientError as e:
            raise TransportError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError("Request timed out") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
