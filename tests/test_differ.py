"""Tests for the difflib-backed line and word differs."""

from __future__ import annotations

import pytest

from diffview.diff_engine import ChangeKind, ChangeRun, InlineSpan, diff_lines, diff_words
from diffview.diff_engine.differ import split_line_tokens, split_word_tokens


class TestSplitTokens:
    """Tests for the tokenizers."""

    def test_line_tokens_keep_newlines(self):
        assert split_line_tokens("a\nb\n") == ["a\n", "b\n"]

    def test_last_line_without_newline(self):
        assert split_line_tokens("a\nb") == ["a\n", "b"]

    def test_empty_text(self):
        assert split_line_tokens("") == []

    def test_blank_lines_are_tokens(self):
        assert split_line_tokens("a\n\nb") == ["a\n", "\n", "b"]

    def test_word_tokens(self):
        assert split_word_tokens('say "hi", bob') == ["say", " ", '"', "hi", '"', ",", " ", "bob"]


class TestDiffLines:
    """Tests for diff_lines()."""

    def test_identical_texts(self):
        assert diff_lines("a\nb\n", "a\nb\n") == [ChangeRun(ChangeKind.EQUAL, "a\nb\n")]

    def test_replacement_removes_before_adding(self):
        runs = diff_lines("a\nb\nc\n", "a\nx\nc\n")
        assert runs == [
            ChangeRun(ChangeKind.EQUAL, "a\n"),
            ChangeRun(ChangeKind.REMOVED, "b\n"),
            ChangeRun(ChangeKind.ADDED, "x\n"),
            ChangeRun(ChangeKind.EQUAL, "c\n"),
        ]

    def test_pure_insertion(self):
        runs = diff_lines("a\n", "a\nb\n")
        assert runs == [ChangeRun(ChangeKind.EQUAL, "a\n"), ChangeRun(ChangeKind.ADDED, "b\n")]

    def test_pure_deletion(self):
        runs = diff_lines("a\nb\n", "b\n")
        assert runs == [ChangeRun(ChangeKind.REMOVED, "a\n"), ChangeRun(ChangeKind.EQUAL, "b\n")]

    def test_both_empty(self):
        assert diff_lines("", "") == []

    @pytest.mark.parametrize(
        "old, new",
        [
            ("one\ntwo\nthree", "zero\none\nthree\nfour"),
            ("", "new\nlines"),
            ("x\ny", ""),
        ],
    )
    def test_runs_reconstruct_both_sides(self, old, new):
        runs = diff_lines(old, new)
        assert "".join(r.text for r in runs if r.kind is not ChangeKind.ADDED) == old
        assert "".join(r.text for r in runs if r.kind is not ChangeKind.REMOVED) == new


class TestDiffWords:
    """Tests for diff_words()."""

    def test_single_word_change(self):
        spans = diff_words("the quick fox", "the slow fox")
        assert spans == [
            InlineSpan("the ", ChangeKind.EQUAL),
            InlineSpan("quick", ChangeKind.REMOVED),
            InlineSpan("slow", ChangeKind.ADDED),
            InlineSpan(" fox", ChangeKind.EQUAL),
        ]

    def test_identical_lines_are_one_equal_span(self):
        assert diff_words("same line", "same line") == [InlineSpan("same line", ChangeKind.EQUAL)]

    def test_spans_reconstruct_both_lines(self):
        a = '"name": "widget",'
        b = '"name": "gadget", "size": 3'
        spans = diff_words(a, b)
        assert "".join(s.text for s in spans if s.kind is not ChangeKind.ADDED) == a
        assert "".join(s.text for s in spans if s.kind is not ChangeKind.REMOVED) == b

    def test_adjacent_spans_of_same_kind_are_merged(self):
        spans = diff_words("a b", "x y")
        kinds = [s.kind for s in spans]
        assert all(first is not second for first, second in zip(kinds, kinds[1:]))
