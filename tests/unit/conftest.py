"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from laakhay.sheets import RequestStatusCache

SHEET_URL = "https://docs.google.com/spreadsheets/d/abc123/edit#gid=0"
LEGACY_SHEET_URL = "https://docs.google.com/spreadsheet/ccc?key=legacyKey&usp=sharing#gid=7"


def _make_payload(
    rows: list[list[Any]],
    *,
    columns: tuple[str, ...] = ("A", "B", "C"),
    labels: tuple[str | None, ...] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a query response with one {"v": value} cell per value."""
    cols: list[dict[str, Any]] = []
    for i, col_id in enumerate(columns):
        col: dict[str, Any] = {"id": col_id, "type": "string"}
        if labels is not None and labels[i] is not None:
            col["label"] = labels[i]
        cols.append(col)
    return {
        "version": "0.6",
        "status": "ok",
        "table": {
            "cols": cols,
            "rows": [{"c": [{"v": value} for value in row]} for row in rows],
        },
        **extra,
    }


@pytest.fixture
def status_cache() -> RequestStatusCache:
    """Isolated status cache backed by a plain dict."""
    return RequestStatusCache(store={})


@pytest.fixture
def sheet_url() -> str:
    return SHEET_URL


@pytest.fixture
def make_payload():
    """Factory building query responses from rows of raw values."""
    return _make_payload


@pytest.fixture
def legacy_sheet_url() -> str:
    return LEGACY_SHEET_URL
