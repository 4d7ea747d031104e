"""Render target protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RenderTarget(Protocol):
    """Destination for rendered markup.

    `is_table` selects grouped header/body semantics: the target receives
    the sections separately and is expected to wrap them in thead/tbody.
    """

    is_table: bool

    def append_html(self, header_html: str, body_html: str) -> None: ...
