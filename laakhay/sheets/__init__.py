"""Laakhay Sheets - Query, page through and render Google Sheets data."""

from .clients import SheetClient, close_default_client, get_default_client, query
from .config import DEFAULTS
from .core import (
    AlreadyLoadedError,
    MalformedURLError,
    MissingKeyOrGidError,
    NoOutputError,
    ParseError,
    PriorFailureError,
    ProviderError,
    RequestIdentity,
    RequestState,
    RequestStatusCache,
    SheetLocation,
    SheetsError,
    SheetVersion,
    TransportError,
    TransportKind,
    UnexpectedFormatError,
    ValidationError,
    get_status_cache,
    parse_sheet_url,
)
from .models import (
    QueryResult,
    RenderTarget,
    ResolvedOptions,
    ResponseAttributes,
    Row,
    SheetQueryOptions,
    SheetRequest,
)
from .runtime import (
    JSONPTransport,
    JSONTransport,
    MarkupBuffer,
    Transport,
    select_transport,
    to_html,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "SheetClient",
    "get_default_client",
    "close_default_client",
    "query",
    "DEFAULTS",
    # Enums
    "SheetVersion",
    "TransportKind",
    # Status cache
    "RequestIdentity",
    "RequestState",
    "RequestStatusCache",
    "get_status_cache",
    # URLs
    "SheetLocation",
    "parse_sheet_url",
    # Models
    "QueryResult",
    "RenderTarget",
    "ResolvedOptions",
    "ResponseAttributes",
    "Row",
    "SheetQueryOptions",
    "SheetRequest",
    # Transports and rendering
    "Transport",
    "JSONTransport",
    "JSONPTransport",
    "select_transport",
    "MarkupBuffer",
    "to_html",
    # Exceptions
    "SheetsError",
    "ValidationError",
    "MalformedURLError",
    "MissingKeyOrGidError",
    "NoOutputError",
    "PriorFailureError",
    "AlreadyLoadedError",
    "ProviderError",
    "TransportError",
    "UnexpectedFormatError",
    "ParseError",
]
