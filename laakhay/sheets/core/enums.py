"""Core enumerations.

Key Types:
    - SheetVersion: Google Sheets generation, each with its own endpoint
    - TransportKind: Direct JSON fetch vs callback-script (JSONP)
"""

from enum import Enum


class SheetVersion(str, Enum):
    """Google Sheets generations distinguished by URL shape.

    Declaration order is the matching order; when more than one generation
    matches a URL the last one wins.
    """

    V2014 = "2014"
    V2010 = "2010"


class TransportKind(str, Enum):
    """How the query response is fetched."""

    JSON = "json"
    JSONP = "jsonp"
