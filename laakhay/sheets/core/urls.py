"""Sheet URL parsing.

Extracts the API endpoint, spreadsheet key and worksheet gid from a Google
Sheet URL. Both supported generations are tried in declaration order and the
last match wins.

Examples:
    >>> parse_sheet_url("https://docs.google.com/spreadsheets/d/abc123/edit#gid=0")
    SheetLocation(endpoint='https://docs.google.com/spreadsheets/d/abc123/gviz/tq?', key='abc123', gid='0', version=<SheetVersion.V2014: '2014'>)
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import config
from .enums import SheetVersion
from .exceptions import MalformedURLError


@dataclass(frozen=True)
class SheetLocation:
    """Where a sheet's query endpoint lives."""

    endpoint: str
    key: str
    gid: str
    version: SheetVersion


def match_sheet_url(url: str) -> SheetLocation | None:
    """Return the SheetLocation for a URL, or None when nothing matches."""
    location: SheetLocation | None = None
    for version in SheetVersion:
        key_match = config.KEY_PATTERNS[version].search(url)
        gid_match = config.GID_PATTERNS[version].search(url)
        if key_match and gid_match:
            key = key_match.group(1)
            location = SheetLocation(
                endpoint=config.API_ENDPOINTS[version].format(key=key),
                key=key,
                gid=gid_match.group(1),
                version=version,
            )
    return location


def parse_sheet_url(url: str) -> SheetLocation:
    """Parse a sheet URL.

    Raises:
        MalformedURLError: If no sheet generation matches both key and gid
    """
    location = match_sheet_url(url or "")
    if location is None:
        raise MalformedURLError(f"Unrecognized Google Sheet URL: {url!r}", url=url)
    return location
