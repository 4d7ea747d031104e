"""Unit tests for SheetQueryOptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laakhay.sheets import DEFAULTS, MarkupBuffer, SheetQueryOptions


class TestDefaults:
    """Test default merging."""

    def test_defaults_match_documented_values(self):
        options = SheetQueryOptions()
        for name, value in DEFAULTS.items():
            assert getattr(options, name) == value

    def test_unknown_keys_ignored(self):
        options = SheetQueryOptions.from_mapping({"url": "u", "server": "x", "debug": True})
        assert options.url == "u"
        assert not hasattr(options, "server")

    def test_options_are_frozen(self):
        options = SheetQueryOptions(url="u")
        with pytest.raises(ValidationError):
            options.url = "other"


class TestCoercion:
    """Test correction of bad integer values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(5, 5), (-3, 0), ("12", 12), ("7 rows", 7), ("abc", 0), (None, 0), (3.9, 3), (True, 0)],
    )
    def test_chunk_size_and_headers_are_natural_numbers(self, raw, expected):
        options = SheetQueryOptions.from_mapping({"chunk_size": raw, "headers": raw})
        assert options.chunk_size == expected
        assert options.headers == expected

    def test_none_url_and_query_become_empty(self):
        options = SheetQueryOptions(url=None, query=None)
        assert options.url == ""
        assert options.query == ""

    def test_labels_coerced_to_strings(self):
        options = SheetQueryOptions(labels=["Name", 2])
        assert options.labels == ["Name", "2"]

    def test_target_must_be_render_target(self):
        with pytest.raises(ValidationError):
            SheetQueryOptions(target=object())

        buffer = MarkupBuffer()
        assert SheetQueryOptions(target=buffer).target is buffer


class TestAliases:
    """Test legacy option names."""

    def test_legacy_names_resolved(self):
        template = lambda row: ""  # noqa: E731
        options = SheetQueryOptions.from_mapping(
            {"sql": "select A", "resetStatus": True, "rowHandler": template, "chunkSize": "10"}
        )
        assert options.query == "select A"
        assert options.reset is True
        assert options.row_template is template
        assert options.chunk_size == 10

    def test_canonical_name_wins_over_alias(self):
        options = SheetQueryOptions.from_mapping({"sql": "select A", "query": "select B"})
        assert options.query == "select B"

        options = SheetQueryOptions.from_mapping({"query": "select B", "sql": "select A"})
        assert options.query == "select B"

    def test_overrides_win_over_mapping(self):
        options = SheetQueryOptions.from_mapping({"query": "select A"}, sql="select C")
        assert options.query == "select C"
