"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_LAAKHAY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_LAAKHAY_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def public_sheet_url() -> str:
    """URL of a sheet shared as "anyone with the link can view"."""
    url = os.environ.get("LAAKHAY_SHEETS_TEST_URL")
    if not url:
        pytest.skip("Set LAAKHAY_SHEETS_TEST_URL to a public sheet URL")
    return url
