"""Unit tests for markup rendering and target dispatch."""

from __future__ import annotations

import pytest

from laakhay.sheets import MarkupBuffer, ParseError, Row
from laakhay.sheets.runtime.render import render_rows, to_html

HEADER = Row(ordinal=0, cells={"Name": "Name", "Age": "Age"})
ALICE = Row(ordinal=1, cells={"Name": "Alice", "Age": "30"})
BOB = Row(ordinal=2, cells={"Name": "Bob", "Age": "25"})


class TestDefaultTemplate:
    """Test the default table-row template."""

    def test_header_row_uses_th(self):
        assert to_html(HEADER) == "<tr><th>Name</th><th>Age</th></tr>"

    def test_data_row_uses_td(self):
        assert to_html(ALICE) == "<tr><td>Alice</td><td>30</td></tr>"


class TestRenderRows:
    """Test header/body split and dispatch."""

    def test_without_target_returns_concatenation(self):
        html = render_rows([HEADER, ALICE])
        assert html == "<tr><th>Name</th><th>Age</th></tr><tr><td>Alice</td><td>30</td></tr>"

    def test_custom_template(self):
        html = render_rows([HEADER, ALICE, BOB], template=lambda row: f"[{row.cells['Name']}]")
        assert html == "[Name][Alice][Bob]"

    def test_table_target_groups_sections(self):
        target = MarkupBuffer(is_table=True)
        html = render_rows([HEADER, ALICE], template=lambda row: row.cells["Name"], target=target)

        assert html == "<thead>Name</thead><tbody>Alice</tbody>"
        assert target.html == html

    def test_plain_target_receives_concatenation(self):
        target = MarkupBuffer()
        html = render_rows([HEADER, ALICE], template=lambda row: row.cells["Name"], target=target)

        assert html == "NameAlice"
        assert target.html == "NameAlice"

    def test_later_chunks_append_to_target(self):
        """Chunks without a header row append only body markup."""
        target = MarkupBuffer()
        template = lambda row: row.cells["Name"]  # noqa: E731

        render_rows([HEADER, ALICE], template=template, target=target)
        render_rows([BOB], template=template, target=target)

        assert target.html == "NameAliceBob"

    def test_no_rows(self):
        assert render_rows([]) == ""

    def test_template_failure_becomes_parse_error(self):
        def broken(row):
            raise KeyError("missing")

        with pytest.raises(ParseError) as exc_info:
            render_rows([ALICE], template=broken, identity="k_0_q")

        assert exc_info.value.identity == "k_0_q"
        assert isinstance(exc_info.value.__cause__, KeyError)


def test_markup_buffer_clear():
    buffer = MarkupBuffer()
    buffer.append_html("<h>", "<b>")
    assert buffer.html == "<h><b>"

    buffer.clear()
    assert buffer.html == ""
