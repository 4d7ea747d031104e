"""Outcome of one query call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import SheetsError
from .resolved import ResolvedOptions
from .row import Row


@dataclass(frozen=True)
class QueryResult:
    """Result delivered to the caller (and to the callback, positionally).

    On success every field is populated. On failure only `error` and
    `options` are set; `raw` is kept when the failure happened while parsing.
    `options` is None when the call failed before a request could be
    resolved (for example a malformed URL).
    """

    error: SheetsError | None
    options: ResolvedOptions | None
    raw: Any = None
    rows: list[Row] | None = None
    html: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_callback_args(self) -> tuple[Any, ...]:
        return (self.error, self.options, self.raw, self.rows, self.html)
