"""Structured logging for sheet requests.

Emits one named event per pipeline milestone with structured fields in
`extra`, so handlers can route or serialize them without parsing messages.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_status_reset(*, identity: str) -> None:
    logger.debug("sheet_status_reset", extra={"identity": identity})


def log_request_resolved(
    *,
    identity: str,
    query: str,
    offset: int,
    chunk_size: int,
) -> None:
    """Log a request that passed validation.

    Args:
        identity: Status cache identity
        query: Final query text sent to the service
        offset: Row offset this call starts at
        chunk_size: Requested chunk size (0 = unchunked)
    """
    logger.debug(
        "sheet_request_resolved",
        extra={
            "identity": identity,
            "query": query,
            "offset": offset,
            "chunk_size": chunk_size,
        },
    )


def log_fetch_dispatched(*, identity: str, url: str, transport: str) -> None:
    logger.debug(
        "sheet_fetch_dispatched",
        extra={"identity": identity, "url": url, "transport": transport},
    )


def log_response_parsed(
    *,
    identity: str,
    rows: int,
    loaded: bool,
    messages: list[str],
    latency_ms: float | None = None,
) -> None:
    """Log a parsed response.

    Args:
        identity: Status cache identity
        rows: Number of rows emitted (header row included)
        loaded: Whether the identity is now fully loaded
        messages: Diagnostics collected for the call
        latency_ms: Fetch-to-parse latency in milliseconds (optional)
    """
    logger.info(
        "sheet_response_parsed",
        extra={
            "identity": identity,
            "rows": rows,
            "loaded": loaded,
            "messages": list(messages),
            "latency_ms": latency_ms,
        },
    )


def log_request_failed(
    *,
    identity: str | None,
    error_type: str,
    error_message: str,
    marked_failed: bool,
) -> None:
    """Log a failed call.

    Args:
        identity: Status cache identity, if resolution got that far
        error_type: Exception class name
        error_message: Exception message
        marked_failed: Whether the identity was marked failed in the cache

    Failures that marked the identity are logged at ERROR. Validation
    rejections (already loaded, prior failure, bad options) are expected
    outcomes and are logged at WARNING.
    """
    logger.log(
        logging.ERROR if marked_failed else logging.WARNING,
        "sheet_request_failed",
        extra={
            "identity": identity,
            "error_type": error_type,
            "error_message": error_message,
            "marked_failed": marked_failed,
        },
    )
