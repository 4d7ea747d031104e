"""Callback-script (JSONP) transport.

The service wraps the response in a call to the handler named by
`tqx=responseHandler:<name>`:

    /*O_o*/
    _sheetrock_callback_3({"version": "0.6", "status": "ok", ...});

The transport fetches the script and decodes the JSON argument of that call.
Handler names come from a process-wide counter so every request gets its own.
"""

from __future__ import annotations

import itertools
import json
import re
from typing import Any, ClassVar

from ...config import JSONP_CALLBACK_PREFIX, JSONP_HANDLER_PARAM
from ...core.enums import TransportKind
from ...core.exceptions import ParseError, TransportError
from ...models.resolved import SheetRequest
from .base import Transport, build_query_url

_HANDLER_IN_URL = re.compile(r"responseHandler(?::|%3A)([A-Za-z_$][\w$]*)")


def unwrap_script(script: str, callback: str) -> Any:
    """Decode the JSON argument of `callback(...)` in a response script.

    Raises:
        TransportError: If the script does not invoke the callback
        ParseError: If the argument is not valid JSON
    """
    match = re.search(re.escape(callback) + r"\((.*)\)\s*;?\s*$", script, re.DOTALL)
    if match is None:
        raise TransportError(f"Response script does not call {callback}")
    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in response script: {e}") from e


class JSONPTransport(Transport):
    """Fetches responses bound to a named callback handler."""

    kind = TransportKind.JSONP

    _callback_index: ClassVar[itertools.count] = itertools.count()

    def next_callback_name(self) -> str:
        return f"{JSONP_CALLBACK_PREFIX}{next(JSONPTransport._callback_index)}"

    def build_url(self, request: SheetRequest) -> str:
        handler = JSONP_HANDLER_PARAM.format(callback=self.next_callback_name())
        return build_query_url(request, extra=[handler])

    async def fetch(self, url: str) -> Any:
        match = _HANDLER_IN_URL.search(url)
        if match is None:
            raise TransportError("URL carries no responseHandler parameter")
        script = await self._http.get_text(url)
        return unwrap_script(script, match.group(1))
