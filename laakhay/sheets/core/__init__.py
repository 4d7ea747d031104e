"""Core components."""

from .enums import SheetVersion, TransportKind
from .exceptions import (
    AlreadyLoadedError,
    MalformedURLError,
    MissingKeyOrGidError,
    NoOutputError,
    ParseError,
    PriorFailureError,
    ProviderError,
    SheetsError,
    TransportError,
    UnexpectedFormatError,
    ValidationError,
)
from .status import RequestIdentity, RequestState, RequestStatusCache, get_status_cache
from .urls import SheetLocation, match_sheet_url, parse_sheet_url

__all__ = [
    "SheetVersion",
    "TransportKind",
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
    # Status cache
    "RequestIdentity",
    "RequestState",
    "RequestStatusCache",
    "get_status_cache",
    # URLs
    "SheetLocation",
    "match_sheet_url",
    "parse_sheet_url",
]
