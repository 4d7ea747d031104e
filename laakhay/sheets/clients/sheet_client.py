"""High-level SheetClient: query a Google Sheet and get rows back.

Request Flow:
    1. Options → OptionResolver (validation, identity, chunk window)
    2. Transport builds the URL and fetches the payload (skipped when a
       pre-fetched payload is supplied)
    3. ResponseNormalizer parses the payload into rows
    4. Rows are rendered into markup (and appended to the target, if any)
    5. The QueryResult is returned and handed to the callback

Every error ends up in `QueryResult.error`; `query` never raises. Errors
raised once a request has passed validation also mark its identity failed,
so later calls fail fast with PriorFailureError until `reset=True`. This
includes a callback that raises while receiving a successful result: the
call is turned into a failure and the callback is invoked once more with
the error. A callback that raises again on that error is only logged.

The module-level `query()` uses a lazily-created default client; call
`close_default_client()` before the event loop ends to release its session.

Chunked requests:
    Chunk state lives in the status cache and is keyed by identity. Issue the
    next chunked call for an identity only after the previous one finished;
    `iter_chunks` does this sequencing for you.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from time import perf_counter
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..config import DEFAULT_TIMEOUT
from ..core.exceptions import ParseError, SheetsError, ValidationError
from ..core.status import RequestStatusCache, get_status_cache
from ..models.options import SheetQueryOptions
from ..models.resolved import ResolvedOptions
from ..models.result import QueryResult
from ..runtime.normalizer import ResponseNormalizer
from ..runtime.render import render_rows
from ..runtime.resolver import OptionResolver
from ..runtime.telemetry import log_fetch_dispatched, log_request_failed, log_response_parsed
from ..runtime.transport import JSONTransport, Transport

logger = logging.getLogger(__name__)

OptionsLike = SheetQueryOptions | Mapping[str, Any] | None


class SheetClient:
    """Queries sheets through one transport and one status cache."""

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        status_cache: RequestStatusCache | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize client.

        Args:
            transport: Transport selected by the host (default: JSONTransport)
            status_cache: Status cache (default: the process-wide cache)
            timeout: Request timeout in seconds for the default transport
        """
        self._transport = transport if transport is not None else JSONTransport(timeout=timeout)
        self._cache = status_cache if status_cache is not None else get_status_cache()
        self._resolver = OptionResolver(self._cache)
        self._normalizer = ResponseNormalizer(self._cache)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def status_cache(self) -> RequestStatusCache:
        return self._cache

    async def query(
        self,
        options: OptionsLike = None,
        bootstrapped: Any = None,
        **overrides: Any,
    ) -> QueryResult:
        """Run one query.

        Args:
            options: SheetQueryOptions or a mapping of option names
            bootstrapped: Pre-fetched payload to parse instead of fetching
            **overrides: Option values applied over `options`

        Returns:
            QueryResult (also passed positionally to the callback)
        """
        callback: Callable[..., Any] | None = None
        resolved: ResolvedOptions | None = None
        try:
            user = self._coerce_options(options, overrides)
            callback = user.callback
            resolved = self._resolver.prepare(user)
            self._resolver.validate(resolved)
        except SheetsError as e:
            return await self._reject(e, resolved, callback)

        result = await self._execute(resolved, bootstrapped)
        callback_error = await self._deliver(callback, result)
        if callback_error is not None and result.ok:
            result = self._fail(result.options, callback_error, result.raw)
            await self._deliver(callback, result)
        return result

    async def iter_chunks(
        self,
        options: OptionsLike = None,
        **overrides: Any,
    ) -> AsyncIterator[QueryResult]:
        """Fetch an identity chunk by chunk until every row is loaded.

        Each successful chunk is yielded in order; the first failed call is
        yielded and ends the iteration. `reset` applies to the first call only.
        Invalid options and a missing `chunk_size` are yielded as a failed
        QueryResult without any request being made.
        """
        callback: Callable[..., Any] | None = None
        try:
            user = self._coerce_options(options, overrides)
            callback = user.callback
            if not user.chunk_size:
                raise ValidationError("iter_chunks requires a positive chunk_size")
        except SheetsError as e:
            yield await self._reject(e, None, callback)
            return

        while True:
            result = await self.query(user)
            yield result
            if not result.ok or result.options is None:
                return
            if self._cache.get(result.options.identity).loaded:
                return
            user = user.model_copy(update={"reset": False})

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> SheetClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _execute(self, resolved: ResolvedOptions, bootstrapped: Any) -> QueryResult:
        raw: Any = None
        started = perf_counter()
        try:
            if bootstrapped is None:
                url = self._transport.build_url(resolved.request)
                resolved = resolved.with_url(url)
                log_fetch_dispatched(
                    identity=resolved.identity,
                    url=url,
                    transport=self._transport.kind.value,
                )
                raw = await self._transport.fetch(url)
            else:
                raw = bootstrapped

            resolved, rows = self._normalizer.parse(resolved, raw)
            html = render_rows(
                rows,
                resolved.user.row_template,
                resolved.user.target,
                identity=resolved.identity,
            )
        except Exception as e:
            return self._fail(resolved, e, raw)

        log_response_parsed(
            identity=resolved.identity,
            rows=len(rows),
            loaded=self._cache.get(resolved.identity).loaded,
            messages=resolved.messages,
            latency_ms=(perf_counter() - started) * 1000.0,
        )
        return QueryResult(error=None, options=resolved, raw=raw, rows=rows, html=html)

    def _fail(self, resolved: ResolvedOptions, error: Exception, raw: Any) -> QueryResult:
        """Mark a dispatched request failed and build its result."""
        error = self._as_library_error(error, resolved.identity)
        self._cache.set_failed(resolved.identity, True)
        log_request_failed(
            identity=resolved.identity,
            error_type=type(error).__name__,
            error_message=str(error),
            marked_failed=True,
        )
        return QueryResult(error=error, options=resolved, raw=raw)

    async def _reject(
        self,
        error: SheetsError,
        resolved: ResolvedOptions | None,
        callback: Callable[..., Any] | None,
    ) -> QueryResult:
        """Deliver a validation failure. The failed flag is left untouched."""
        log_request_failed(
            identity=error.identity,
            error_type=type(error).__name__,
            error_message=str(error),
            marked_failed=False,
        )
        result = QueryResult(error=error, options=resolved)
        await self._deliver(callback, result)
        return result

    @staticmethod
    def _coerce_options(options: OptionsLike, overrides: Mapping[str, Any]) -> SheetQueryOptions:
        try:
            if isinstance(options, SheetQueryOptions):
                if not overrides:
                    return options
                current = {name: getattr(options, name) for name in SheetQueryOptions.model_fields}
                return SheetQueryOptions.from_mapping(current, **overrides)
            return SheetQueryOptions.from_mapping(options, **overrides)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid options: {e}") from e

    @staticmethod
    def _as_library_error(error: Exception, identity: str) -> SheetsError:
        if isinstance(error, SheetsError):
            if error.identity is None:
                error.identity = identity
            return error
        wrapped = ParseError(f"{type(error).__name__}: {error}", identity=identity)
        wrapped.__cause__ = error
        return wrapped

    @staticmethod
    async def _deliver(
        callback: Callable[..., Any] | None, result: QueryResult
    ) -> Exception | None:
        """Invoke the callback and return what it raised, if anything."""
        if callback is None:
            return None
        try:
            outcome = callback(*result.as_callback_args())
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            logger.error(f"Error in query callback: {e}", exc_info=True)
            return e
        return None


_default_client: SheetClient | None = None


def get_default_client() -> SheetClient:
    """Get the lazily-created module-level client (JSON transport)."""
    global _default_client

    if _default_client is None:
        _default_client = SheetClient()
    return _default_client


async def close_default_client() -> None:
    """Close the default client's session; the next `query()` creates a new one."""
    global _default_client

    if _default_client is not None:
        await _default_client.close()
        _default_client = None


async def query(options: OptionsLike = None, bootstrapped: Any = None, **overrides: Any) -> QueryResult:
    """Run one query with the default client.

    Example:
        >>> result = await query(
        ...     url="https://docs.google.com/spreadsheets/d/<key>/edit#gid=0",
        ...     query="select A, B",
        ...     callback=print,
        ... )
    """
    return await get_default_client().query(options, bootstrapped, **overrides)
