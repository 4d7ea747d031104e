#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.sheets import MarkupBuffer, SheetClient, select_transport


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query a public Google Sheet and print its rows")
    p.add_argument("url", help="Sheet URL, e.g. https://docs.google.com/spreadsheets/d/<key>/edit#gid=0")
    p.add_argument("--query", default="", help="Visualization API query, e.g. 'select A, B'")
    p.add_argument("--chunk-size", type=int, default=0, help="Rows per request (0 = all)")
    p.add_argument("--transport", default="json", choices=["json", "jsonp"])
    p.add_argument("--html", action="store_true", help="Print table markup instead of rows")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    target = MarkupBuffer(is_table=True)

    def on_result(error, options, raw, rows, html):
        if error is not None:
            print(f"ERROR {type(error).__name__}: {error}")
            return
        for row in rows:
            print(f"{row.ordinal:>5} | " + " | ".join(row.cells.values()))
        for message in options.messages:
            print(f"NOTE {message}")

    async with SheetClient(select_transport(args.transport)) as client:
        options = {"url": args.url, "query": args.query, "callback": on_result, "target": target}
        if args.chunk_size:
            async for _ in client.iter_chunks(options, chunk_size=args.chunk_size):
                pass
        else:
            await client.query(options)

    if args.html:
        print(f"<table>{target.html}</table>")


if __name__ == "__main__":
    asyncio.run(main())
