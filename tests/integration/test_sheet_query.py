"""Integration tests against a live public sheet."""

import os

import pytest

from laakhay.sheets import (
    JSONPTransport,
    JSONTransport,
    MarkupBuffer,
    RequestStatusCache,
    SheetClient,
)

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
    reason="Requires network access to query a sheet",
)


class TestSheetQueryIntegration:
    """Query a live sheet through each transport."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("transport_class", [JSONTransport, JSONPTransport])
    async def test_query_first_rows(self, public_sheet_url, transport_class):
        target = MarkupBuffer(is_table=True)
        async with SheetClient(transport_class(), status_cache=RequestStatusCache()) as client:
            result = await client.query(url=public_sheet_url, query="select *", chunk_size=5, target=target)

        assert result.ok, result.error
        assert result.rows[0].ordinal == 0
        assert 1 <= len(result.rows) <= 6
        assert target.html.startswith("<thead>")

    @pytest.mark.asyncio
    async def test_iter_chunks_reaches_end(self, public_sheet_url):
        async with SheetClient(status_cache=RequestStatusCache()) as client:
            results = [
                r
                async for r in client.iter_chunks(url=public_sheet_url, chunk_size=50, callback=print)
            ]

        assert all(r.ok for r in results)
        assert client.status_cache.get(results[-1].options.identity).loaded
