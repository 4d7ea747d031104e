"""Shared Google Sheets constants.

This module centralizes endpoint templates, URL patterns and transport
settings so the resolver and transports can stay small and focused.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any

from .core.enums import SheetVersion

# Google Visualization API endpoints, one per sheet generation.
#  - 2014 ("new" Sheets): https://docs.google.com/spreadsheets/d/<key>/edit#gid=<gid>
#  - 2010 (legacy):       https://docs.google.com/spreadsheet/ccc?key=<key>#gid=<gid>
API_ENDPOINTS = {
    SheetVersion.V2014: "https://docs.google.com/spreadsheets/d/{key}/gviz/tq?",
    SheetVersion.V2010: "https://spreadsheets.google.com/tq?key={key}&",
}

KEY_PATTERNS = {
    SheetVersion.V2014: re.compile(r"spreadsheets/d/([^/#]+)", re.IGNORECASE),
    SheetVersion.V2010: re.compile(r"key=([^&#]+)", re.IGNORECASE),
}

GID_PATTERNS = {
    SheetVersion.V2014: re.compile(r"gid=([^/&#]+)", re.IGNORECASE),
    SheetVersion.V2010: re.compile(r"gid=([^/&#]+)", re.IGNORECASE),
}

# New Sheets prepend an anti-XSSI guard to JSON output when
# X-DataSource-Auth is sent; it has to be stripped before decoding.
DATASOURCE_AUTH_HEADER = {"X-DataSource-Auth": "true"}
XSSI_PREFIX = ")]}'"

# Callback-script transport binds the response to a named handler.
JSONP_CALLBACK_PREFIX = "_sheetrock_callback_"
JSONP_HANDLER_PARAM = "tqx=responseHandler:{callback}"

DEFAULT_TIMEOUT = 30.0

# Documented option defaults (read-only view).
DEFAULTS: MappingProxyType[str, Any] = MappingProxyType(
    {
        "url": "",  # Google Sheet URL
        "query": "",  # Google Visualization API query
        "target": None,  # Render target to append markup to
        "chunk_size": 0,  # Number of rows to fetch (0 = all)
        "labels": [],  # Override *returned* column labels
        "row_template": None,  # Row -> str
        "callback": None,  # (error, options, raw, rows, html) -> None
        "headers": 0,  # Number of header rows in the sheet
        "reset": False,  # Reset request status
    }
)

# Legacy and camelCase option names, resolved once when options are built.
OPTION_ALIASES = {
    "sql": "query",
    "chunkSize": "chunk_size",
    "rowTemplate": "row_template",
    "rowHandler": "row_template",
    "row_handler": "row_template",
    "resetStatus": "reset",
    "reset_status": "reset",
}
