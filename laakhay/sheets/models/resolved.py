"""Per-call resolved request state passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .options import SheetQueryOptions


@dataclass(frozen=True)
class SheetRequest:
    """Derived request fields.

    Attributes:
        endpoint: Query endpoint for the sheet generation
        key: Spreadsheet key
        gid: Worksheet gid
        query: Final query text, including LIMIT/OFFSET when chunked
        identity: Status cache identity string (key_gid_query)
        url: Fetch URL, set once the transport has built it
    """

    endpoint: str
    key: str
    gid: str
    query: str
    identity: str
    url: str | None = None


@dataclass(frozen=True)
class ResponseAttributes:
    """Facts derived from one response.

    Attributes:
        last: Number of payload rows to use after trimming to the chunk size
        header: 1 if the service extracted column labels from a header row
        labels: Effective column labels
    """

    last: int
    header: int
    labels: tuple[str, ...]


@dataclass(frozen=True)
class ResolvedOptions:
    """Snapshot of one call: user options, request fields and diagnostics.

    `offset` is the row offset this call starts at (read before the cache
    was advanced). `messages` accumulates diagnostics across stages.
    """

    user: SheetQueryOptions
    request: SheetRequest
    offset: int = 0
    messages: list[str] = field(default_factory=list)
    response: ResponseAttributes | None = None

    @property
    def identity(self) -> str:
        return self.request.identity

    def with_url(self, url: str) -> ResolvedOptions:
        return replace(self, request=replace(self.request, url=url))

    def with_response(self, response: ResponseAttributes) -> ResolvedOptions:
        return replace(self, response=response)
