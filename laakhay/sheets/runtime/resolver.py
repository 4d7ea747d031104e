"""Option resolution and validation.

Turns caller options into a ResolvedOptions snapshot:

Request Flow:
    1. Locate the sheet (endpoint, key, gid) from the URL
    2. Derive the identity (key_gid_query)
    3. Reset cached status if requested
    4. Read the current row offset
    5. For chunked requests, append LIMIT/OFFSET and advance the stored offset
    6. Validate: output destination, key/gid, prior failure, already loaded

Every check happens before any network activity.

The service errors when OFFSET exceeds the row count, so chunked requests
ask for one row more than the chunk size. The normalizer treats a response
with fewer rows than the chunk size as the end of the data.
"""

from __future__ import annotations

from ..core.exceptions import (
    AlreadyLoadedError,
    MissingKeyOrGidError,
    NoOutputError,
    PriorFailureError,
)
from ..core.status import RequestIdentity, RequestStatusCache
from ..core.urls import parse_sheet_url
from ..models.options import SheetQueryOptions
from ..models.resolved import ResolvedOptions, SheetRequest
from .telemetry import log_request_resolved, log_status_reset

RESET_MESSAGE = "Request status has been reset."


def chunk_query(query: str, chunk_size: int, offset: int) -> str:
    """Append the chunk window to a query, over-fetching by one row."""
    window = f"LIMIT {chunk_size + 1} OFFSET {offset}"
    return f"{query} {window}" if query else window


class OptionResolver:
    """Resolves options against the status cache."""

    def __init__(self, status_cache: RequestStatusCache) -> None:
        self._cache = status_cache

    def resolve(self, options: SheetQueryOptions) -> ResolvedOptions:
        """Resolve and validate options for one call.

        Raises:
            MalformedURLError: URL matches no sheet generation
            NoOutputError: No target and no callback
            MissingKeyOrGidError: Key or gid is empty
            PriorFailureError: A previous request for the identity failed
            AlreadyLoadedError: The identity has no more rows
        """
        return self.validate(self.prepare(options))

    def prepare(self, options: SheetQueryOptions) -> ResolvedOptions:
        """Locate the sheet, apply reset and advance the chunk window.

        Raises:
            MalformedURLError: URL matches no sheet generation
        """
        location = parse_sheet_url(options.url)
        identity = str(RequestIdentity(location.key, location.gid, options.query))
        messages: list[str] = []

        if options.reset:
            self._cache.reset(identity)
            messages.append(RESET_MESSAGE)
            log_status_reset(identity=identity)

        offset = self._cache.get(identity).offset

        query = options.query
        if options.chunk_size:
            query = chunk_query(query, options.chunk_size, offset)
            # The stored offset advances by the chunk size, not the over-fetch.
            self._cache.set_offset(identity, offset + options.chunk_size)

        return ResolvedOptions(
            user=options,
            request=SheetRequest(
                endpoint=location.endpoint,
                key=location.key,
                gid=location.gid,
                query=query,
                identity=identity,
            ),
            offset=offset,
            messages=messages,
        )

    def validate(self, resolved: ResolvedOptions) -> ResolvedOptions:
        """Run the pre-network checks in order.

        Raises:
            NoOutputError: No target and no callback
            MissingKeyOrGidError: Key or gid is empty
            PriorFailureError: A previous request for the identity failed
            AlreadyLoadedError: The identity has no more rows
        """
        user = resolved.user
        request = resolved.request
        identity = request.identity

        if user.target is None and user.callback is None:
            raise NoOutputError("No render target or callback provided.", identity=identity)

        if not (request.key and request.gid):
            raise MissingKeyOrGidError("No key/gid in the provided URL.", identity=identity)

        state = self._cache.get(identity)
        if state.failed:
            raise PriorFailureError("A previous request for this resource failed.", identity=identity)
        if state.loaded:
            raise AlreadyLoadedError("No more rows to load!", identity=identity)

        log_request_resolved(
            identity=identity,
            query=request.query,
            offset=resolved.offset,
            chunk_size=user.chunk_size,
        )
        return resolved
