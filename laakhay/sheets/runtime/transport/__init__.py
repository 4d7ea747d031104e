"""Transports: direct JSON fetch and callback-script (JSONP) fetch.

The host picks one transport at startup with `select_transport` and injects
it into the SheetClient; nothing else branches on the transport kind.
"""

from __future__ import annotations

from typing import Any

from ...core.enums import TransportKind
from .base import Transport, build_query_url
from .direct import JSONTransport, decode_json
from .jsonp import JSONPTransport, unwrap_script

_TRANSPORTS: dict[TransportKind, type[Transport]] = {
    TransportKind.JSON: JSONTransport,
    TransportKind.JSONP: JSONPTransport,
}


def select_transport(kind: TransportKind | str = TransportKind.JSON, **kwargs: Any) -> Transport:
    """Create the transport for a kind ("json" or "jsonp")."""
    return _TRANSPORTS[TransportKind(kind)](**kwargs)


__all__ = [
    "Transport",
    "JSONTransport",
    "JSONPTransport",
    "build_query_url",
    "decode_json",
    "select_transport",
    "unwrap_script",
]
