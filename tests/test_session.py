"""Tests for ComparisonSession state handling."""

from __future__ import annotations

import pytest

from diffview.diff_engine import (
    ComparisonSession,
    DiffOptions,
    FlatView,
    JsonParseScope,
    JsonView,
    LineKind,
    ViewMode,
)
from diffview.diff_engine.session import NO_DIFFERENCES_MESSAGE


@pytest.fixture
def json_session() -> ComparisonSession:
    return ComparisonSession(
        '{"a": {"b": 1}, "c": [1]}',
        '{"a": {"b": 2}, "c": [1]}',
        DiffOptions(is_json=True),
    )


class TestSessionBlocks:
    """Tests for block computation and invalidation."""

    def test_identical(self):
        session = ComparisonSession("same\n", "same\n")
        assert session.is_identical
        assert session.blocks == []
        assert session.current_block is None
        assert session.status_text == NO_DIFFERENCES_MESSAGE
        assert session.navigate("next") == 0

    def test_status_text(self, two_change_texts):
        session = ComparisonSession(*two_change_texts)
        assert session.status_text == "1 of 2 differences"
        session.navigate("next")
        assert session.status_text == "2 of 2 differences"

    def test_navigation_wraps(self, two_change_texts):
        session = ComparisonSession(*two_change_texts)
        assert session.navigate("next") == 1
        assert session.navigate("next") == 0
        assert session.navigate("prev") == 1
        assert session.current_block is session.blocks[1]

    def test_blocks_are_cached(self, simple_texts):
        session = ComparisonSession(*simple_texts)
        assert session.blocks is session.blocks

    def test_toggle_only_diffs_recomputes(self, simple_texts):
        session = ComparisonSession(*simple_texts)
        before = session.blocks

        assert session.toggle_option("show_only_diffs") is True
        assert session.blocks is not before
        assert [line.text for line in session.blocks[0].lines] == ["b", "x"]

    def test_ignore_whitespace(self):
        session = ComparisonSession("a\n  b\n", "a\nb\n")
        assert not session.is_identical
        session.set_option("ignore_whitespace", True)
        assert session.is_identical

    def test_view_mode_does_not_recompute(self, simple_texts):
        session = ComparisonSession(*simple_texts)
        before = session.blocks

        session.set_option("view_mode", "unified")
        assert session.options.view_mode is ViewMode.UNIFIED
        assert session.blocks is before
        assert session.toggle_view_mode() is ViewMode.SPLIT

    def test_set_texts_clamps_index(self, two_change_texts, simple_texts):
        session = ComparisonSession(*two_change_texts)
        session.navigate("previous")
        assert session.current_index == 1

        session.set_texts(*simple_texts)
        assert session.current_index == 0
        assert len(session.blocks) == 1

    def test_unknown_option(self, simple_texts):
        with pytest.raises(ValueError):
            ComparisonSession(*simple_texts).set_option("colour", True)

    def test_bad_option_value(self, simple_texts):
        with pytest.raises(ValueError):
            ComparisonSession(*simple_texts).set_option("view_mode", "diagonal")

    def test_set_option_coerces_scope(self, simple_texts):
        session = ComparisonSession(*simple_texts)
        session.set_option("json_parse_scope", "block")
        assert session.options.json_parse_scope is JsonParseScope.BLOCK

    def test_bool_option_rejects_other_types(self, simple_texts):
        session = ComparisonSession(*simple_texts)
        with pytest.raises(ValueError):
            session.set_option("show_only_diffs", "false")
        assert session.options.show_only_diffs is False

        session.set_option("show_only_diffs", True)
        assert session.options.show_only_diffs is True


class TestSessionRendering:
    """Tests for rendering and JSON expansion state."""

    def test_flat_render(self, simple_texts):
        session = ComparisonSession(*simple_texts, DiffOptions(view_mode=ViewMode.UNIFIED))
        view = session.render(session.blocks[0])
        assert isinstance(view, FlatView)
        assert view.view_mode is ViewMode.UNIFIED

    def test_json_render_starts_collapsed(self, json_session):
        view = json_session.render(json_session.blocks[0])
        assert isinstance(view, JsonView)
        assert not view.root.expanded
        assert view.root.kind is LineKind.REMOVED

    def test_toggle_expansion(self, json_session):
        assert json_session.toggle_expansion("") is True
        assert json_session.render(json_session.blocks[0]).root.expanded
        assert json_session.toggle_expansion("") is False
        assert not json_session.render(json_session.blocks[0]).root.expanded

    def test_set_expanded(self, json_session):
        json_session.set_expanded("a", True)
        json_session.set_expanded("a", True)
        root = json_session.render(json_session.blocks[0]).root
        assert root.children[0].expanded
        json_session.set_expanded("a", False)
        assert len(json_session.expansion) == 0

    def test_expand_and_collapse_all(self, json_session):
        assert json_session.expand_all() == 3
        root = json_session.render(json_session.blocks[0]).root
        assert root.expanded and root.children[0].expanded and root.children[1].expanded

        json_session.collapse_all()
        assert len(json_session.expansion) == 0

    def test_expansion_survives_option_changes(self, json_session):
        json_session.toggle_expansion("a")
        json_session.toggle_option("show_only_diffs")
        assert json_session.render(json_session.blocks[0]).root.children[0].expanded

    def test_invalid_json_falls_back(self):
        session = ComparisonSession("not json", "still not json", DiffOptions(is_json=True))
        assert isinstance(session.render_all()[0], FlatView)
        assert session.expand_all() == 0
