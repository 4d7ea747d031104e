"""Data models.

Architecture:
    - Pydantic v2 models for data crossing the library boundary: caller
      options (SheetQueryOptions), raw service payloads (GViz*) and output
      rows (Row). Options and rows are frozen.
    - Frozen dataclasses for internal pipeline state (ResolvedOptions,
      SheetRequest, ResponseAttributes, QueryResult).
"""

from .options import SheetQueryOptions
from .payload import GVizCell, GVizColumn, GVizResponse, GVizRow, GVizTable
from .resolved import ResolvedOptions, ResponseAttributes, SheetRequest
from .result import QueryResult
from .row import Row
from .target import RenderTarget

__all__ = [
    "RenderTarget",
    "GVizCell",
    "GVizColumn",
    "GVizResponse",
    "GVizRow",
    "GVizTable",
    "QueryResult",
    "ResolvedOptions",
    "ResponseAttributes",
    "Row",
    "SheetQueryOptions",
    "SheetRequest",
]
