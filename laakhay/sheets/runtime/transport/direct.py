"""Direct HTTP transport returning JSON."""

from __future__ import annotations

import json
import re
from typing import Any

from ...config import DATASOURCE_AUTH_HEADER, XSSI_PREFIX
from ...core.enums import TransportKind
from ...core.exceptions import ParseError
from .base import Transport

_XSSI_GUARD = re.compile("^" + re.escape(XSSI_PREFIX) + r"\n?")


def decode_json(text: str) -> Any:
    """Strip the anti-XSSI guard and decode JSON.

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return json.loads(_XSSI_GUARD.sub("", text, count=1))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON response: {e}") from e


class JSONTransport(Transport):
    """Fetches responses with a plain GET and `X-DataSource-Auth`."""

    kind = TransportKind.JSON

    async def fetch(self, url: str) -> Any:
        text = await self._http.get_text(url, headers=dict(DATASOURCE_AUTH_HEADER))
        return decode_json(text)
