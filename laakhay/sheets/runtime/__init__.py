"""Runtime pipeline: option resolution, transport, normalization, rendering."""

from .normalizer import ResponseNormalizer, cell_value, collect_messages
from .render import MarkupBuffer, render_rows, to_html, wrap_tag
from .resolver import OptionResolver, chunk_query
from .transport import JSONPTransport, JSONTransport, Transport, build_query_url, select_transport

__all__ = [
    "OptionResolver",
    "ResponseNormalizer",
    "MarkupBuffer",
    "Transport",
    "JSONTransport",
    "JSONPTransport",
    "build_query_url",
    "cell_value",
    "chunk_query",
    "collect_messages",
    "render_rows",
    "select_transport",
    "to_html",
    "wrap_tag",
]
