"""Google Visualization API raw response schemas.

These models represent the JSON structure returned by the query endpoint
before conversion to Row models:

    {
        "status": "ok",
        "warnings": [{"reason": ..., "message": ..., "detailed_message": ...}],
        "table": {
            "cols": [{"id": "A", "label": "Name", "type": "string"}],
            "rows": [{"c": [{"v": "Alice", "f": "Alice"}, null]}]
        }
    }

Each cell carries its raw value in `v` and, optionally, its formatted
display value in `f`. A row without `c` has no cell data.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class GVizColumn(BaseModel):
    """Column metadata. `label` is present when a header row was extracted."""

    id: str
    label: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="allow")


class GVizCell(BaseModel):
    """Table cell with raw (`v`) and formatted (`f`) values."""

    v: Any = None
    f: Any = None

    model_config = ConfigDict(extra="allow")


class GVizRow(BaseModel):
    c: list[GVizCell | None] | None = None

    model_config = ConfigDict(extra="allow")


class GVizTable(BaseModel):
    cols: list[GVizColumn]
    rows: list[GVizRow]

    model_config = ConfigDict(extra="allow")


class GVizResponse(BaseModel):
    """Top-level query response."""

    status: str
    table: GVizTable

    model_config = ConfigDict(extra="allow")
