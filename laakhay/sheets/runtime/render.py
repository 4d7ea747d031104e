"""Markup rendering and dispatch to render targets.

Rows are passed through a row template (default: an HTML table row with
`<th>` cells for the header row and `<td>` cells otherwise). Output is split
into a header section (ordinal 0) and a body section (ordinal > 0).

A render target receives both sections. Targets that represent a table get
grouped `<thead>`/`<tbody>` semantics; anything else gets the sections
concatenated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..core.exceptions import ParseError
from ..models.row import Row
from ..models.target import RenderTarget

RowTemplate = Callable[[Row], str]


class MarkupBuffer:
    """In-memory render target accumulating markup across calls."""

    def __init__(self, *, is_table: bool = False) -> None:
        self.is_table = is_table
        self._parts: list[str] = []

    def append_html(self, header_html: str, body_html: str) -> None:
        if self.is_table:
            self._parts.append(wrap_tag(header_html, "thead"))
            self._parts.append(wrap_tag(body_html, "tbody"))
        else:
            self._parts.append(header_html + body_html)

    @property
    def html(self) -> str:
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()


def wrap_tag(text: str, tag: str) -> str:
    return f"<{tag}>{text}</{tag}>"


def to_html(row: Row) -> str:
    """Default row template: one `<tr>` of `<th>` (header) or `<td>` cells."""
    tag = "th" if row.is_header else "td"
    return wrap_tag("".join(wrap_tag(value, tag) for value in row.cells.values()), "tr")


def render_rows(
    rows: Iterable[Row],
    template: RowTemplate | None = None,
    target: RenderTarget | None = None,
    *,
    identity: str | None = None,
) -> str:
    """Render rows and append them to the target, if any.

    Returns:
        The combined markup, grouped into thead/tbody for table targets

    Raises:
        ParseError: If the row template raises
    """
    template = template or to_html
    header_html = ""
    body_html = ""

    for row in rows:
        try:
            markup = template(row)
        except Exception as e:
            raise ParseError(f"Row template failed: {e}", identity=identity) from e
        if row.ordinal:
            body_html += str(markup)
        else:
            header_html += str(markup)

    if target is None:
        return header_html + body_html

    target.append_html(header_html, body_html)
    if target.is_table:
        return wrap_tag(header_html, "thead") + wrap_tag(body_html, "tbody")
    return header_html + body_html
