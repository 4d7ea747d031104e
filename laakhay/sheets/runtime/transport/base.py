"""Transport abstraction for fetching query responses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from ...config import DEFAULT_TIMEOUT
from ...core.enums import TransportKind
from ...models.resolved import SheetRequest
from ...utils.http import HTTPClient

# Marks left unescaped in query components, in addition to alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!~*'()"


def build_query_url(request: SheetRequest, extra: list[str] | None = None) -> str:
    """Build the fetch URL: endpoint + gid + tq (+ transport parameters)."""
    params = [
        f"gid={quote(request.gid, safe=_URI_COMPONENT_SAFE)}",
        f"tq={quote(request.query, safe=_URI_COMPONENT_SAFE)}",
    ]
    params.extend(extra or [])
    return request.endpoint + "&".join(params)


class Transport(ABC):
    """Fetches and decodes a query response.

    Implementations build the URL for a request and fetch it over a shared
    HTTPClient. Errors are reported as TransportError (network, status,
    malformed envelope) or ParseError (JSON decoding).
    """

    kind: TransportKind

    def __init__(self, http: HTTPClient | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = http or HTTPClient(timeout=timeout)

    def build_url(self, request: SheetRequest) -> str:
        return build_query_url(request)

    @abstractmethod
    async def fetch(self, url: str) -> Any:
        """Fetch a URL built by `build_url` and return the decoded payload."""
        ...

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
