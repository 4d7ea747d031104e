"""Request status cache for chunked and failed requests.

Architecture:
    Every logical query against a logical sheet is identified by a
    RequestIdentity (key, gid, query). The cache maps the identity string to a
    RequestState recording how far paging has progressed (offset), whether the
    result set is exhausted (loaded) and whether a request has failed (failed).

    - The resolver reads the state to seed the offset and to reject requests
      that already failed or are fully loaded.
    - The normalizer writes `loaded` after each response.
    - The client writes `failed` when a dispatched request errors.
    - Callers reset the state explicitly with `reset=True`.

Design Decisions:
    - Explicit object: callers can pass their own RequestStatusCache to a
      SheetClient; `get_status_cache()` returns the process-wide default.
    - Injectable backing store: any MutableMapping can back the cache, so
      tests can observe or isolate state.
    - No eviction: entries live for the lifetime of the process. Long-running
      processes issuing many distinct queries grow the store without bound;
      pass a bounded mapping or call `clear()` if that matters.
    - No locking: the cache assumes one call at a time per identity on a
      single event loop. Concurrent calls against the same identity race on
      the shared offset.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RequestIdentity:
    """Composite key scoping paging and failure state."""

    key: str
    gid: str
    query: str

    def __str__(self) -> str:
        return f"{self.key}_{self.gid}_{self.query}"


@dataclass(frozen=True)
class RequestState:
    """Paging and failure state of one identity.

    Attributes:
        loaded: No more rows are available
        failed: A previous request failed (sticky until reset)
        offset: Row offset of the next chunk
    """

    loaded: bool = False
    failed: bool = False
    offset: int = 0


class RequestStatusCache:
    """Mapping from identity to RequestState with lazy defaults."""

    def __init__(self, store: MutableMapping[str, RequestState] | None = None) -> None:
        self._store: MutableMapping[str, RequestState] = store if store is not None else {}

    def get(self, identity: str | RequestIdentity) -> RequestState:
        """Return the state for an identity (defaults when unknown)."""
        return self._store.get(str(identity), RequestState())

    def set_loaded(self, identity: str | RequestIdentity, loaded: bool) -> None:
        self._update(identity, loaded=bool(loaded))

    def set_failed(self, identity: str | RequestIdentity, failed: bool) -> None:
        self._update(identity, failed=bool(failed))

    def set_offset(self, identity: str | RequestIdentity, offset: int) -> None:
        if offset < 0:
            raise ValueError("offset must be non-negative")
        self._update(identity, offset=offset)

    def reset(self, identity: str | RequestIdentity) -> None:
        """Restore loaded/failed/offset to their defaults."""
        self._store[str(identity)] = RequestState()

    def clear(self) -> None:
        """Forget every identity."""
        self._store.clear()

    def __contains__(self, identity: object) -> bool:
        return str(identity) in self._store

    def __len__(self) -> int:
        return len(self._store)

    def _update(self, identity: str | RequestIdentity, **changes: object) -> None:
        key = str(identity)
        self._store[key] = replace(self._store.get(key, RequestState()), **changes)


_default_cache: RequestStatusCache | None = None


def get_status_cache() -> RequestStatusCache:
    """Get the process-wide default status cache.

    Shared by every SheetClient created without an explicit cache, so two
    clients querying the same identity share paging and failure state.
    """
    global _default_cache

    if _default_cache is None:
        _default_cache = RequestStatusCache()
    return _default_cache
