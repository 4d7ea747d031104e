"""Response normalization: raw query payload -> Row models.

Architecture:
    The normalizer plays the role of a response adapter. It validates the
    payload against the GViz schemas, derives ResponseAttributes, records
    end-of-data in the status cache and flattens the table into rows.

Ordinal numbering:
    ordinal = max(0, offset + i + 1 + header - headers)

    where `i` is the payload row index, `header` is 1 when the service
    extracted labels from a header row and `headers` is the caller's declared
    header row count. When `headers` exceeds `header + 1` the first rows of
    every chunk clamp to 0 and share the header ordinal; this is kept as-is.

Cell values:
    Only a missing cell or a null `v` gives "". Falsy scalars keep their
    display form: 0 -> "0", False -> "false". Browser clients of the same
    endpoint traditionally blank every falsy value; this module does not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import UnexpectedFormatError
from ..core.status import RequestStatusCache
from ..models.payload import GVizCell, GVizColumn, GVizResponse, GVizTable
from ..models.resolved import ResolvedOptions, ResponseAttributes
from ..models.row import Row
from ..utils.coerce import to_natural_number, to_text, trim

MESSAGE_SECTIONS = ("warnings", "errors")


def column_label(col: GVizColumn) -> str | None:
    """Return the column label without any whitespace, or None."""
    if col.label is None:
        return None
    return "".join(col.label.split())


def column_label_or_id(col: GVizColumn) -> str:
    return column_label(col) or col.id


def cell_value(cell: GVizCell | None) -> str:
    """Extract a cell's display string.

    Array values use the formatted value when present, otherwise their
    elements joined without a separator. Missing cells and null values
    give "".
    """
    if cell is None or cell.v is None:
        return ""
    value = cell.v
    if isinstance(value, list):
        if cell.f is not None:
            return trim(to_text(cell.f))
        return trim("".join(to_text(item) for item in value))
    return trim(to_text(value))


def collect_messages(payload: Any, messages: list[str]) -> None:
    """Append embedded warning/error messages to the diagnostic log."""
    if not isinstance(payload, Mapping):
        return
    for section in MESSAGE_SECTIONS:
        entries = payload.get(section)
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            if "detailed_message" in entry:
                messages.append(str(entry["detailed_message"]))
            elif "message" in entry:
                messages.append(str(entry["message"]))


class ResponseNormalizer:
    """Parses query payloads into rows and updates the status cache."""

    def __init__(self, status_cache: RequestStatusCache) -> None:
        self._cache = status_cache

    def parse(self, resolved: ResolvedOptions, payload: Any) -> tuple[ResolvedOptions, list[Row]]:
        """Parse a payload.

        Args:
            resolved: Options of the call that produced the payload
            payload: Decoded JSON response

        Returns:
            Options updated with the response attributes, and the rows

        Raises:
            UnexpectedFormatError: Payload lacks status/table or cols/rows
        """
        collect_messages(payload, resolved.messages)

        try:
            response = GVizResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise UnexpectedFormatError(
                "Unexpected API response format.", identity=resolved.identity
            ) from e

        attributes = self.attributes(resolved, response.table)
        resolved = resolved.with_response(attributes)
        return resolved, self.rows(resolved, response.table)

    def attributes(self, resolved: ResolvedOptions, table: GVizTable) -> ResponseAttributes:
        chunk_size = resolved.user.chunk_size
        labels = resolved.user.labels
        row_count = len(table.rows)

        last = min(row_count, chunk_size or row_count)
        self._cache.set_loaded(resolved.identity, not chunk_size or last < chunk_size)

        header = 1 if any(column_label(col) for col in table.cols) else 0

        if labels and len(labels) == len(table.cols):
            effective = tuple(labels)
        else:
            effective = tuple(column_label_or_id(col) for col in table.cols)

        return ResponseAttributes(last=last, header=header, labels=effective)

    def rows(self, resolved: ResolvedOptions, table: GVizTable) -> list[Row]:
        attributes = resolved.response
        if attributes is None:
            raise ValueError("response attributes must be computed before rows")

        output: list[Row] = []

        # One header row per paging sequence.
        if not resolved.offset:
            output.append(Row(ordinal=0, cells={label: label for label in attributes.labels}))

        for i, row in enumerate(table.rows):
            if i >= attributes.last:
                break
            if row.c is None:
                continue
            ordinal = to_natural_number(
                resolved.offset + i + 1 + attributes.header - resolved.user.headers
            )
            cells = {
                label: cell_value(cell) for label, cell in zip(attributes.labels, row.c)
            }
            output.append(Row(ordinal=ordinal, cells=cells))

        return output
