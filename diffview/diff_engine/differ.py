"""
difflib-backed implementations of the line and word differs.

Both differs align token sequences with SequenceMatcher and translate its
opcodes into runs. A replace opcode becomes a removed run followed by an
added run, so removals always precede additions at the same position.
"""

from __future__ import annotations

import re
from difflib import SequenceMatcher

from diffview.diff_engine.base import LineDiffer, WordDiffer
from diffview.diff_engine.models import ChangeKind, ChangeRun, InlineSpan

# Word runs, whitespace runs, or a single punctuation character
WORD_TOKEN_PATTERN = re.compile(r"\w+|\s+|[^\w\s]", re.UNICODE)


def split_line_tokens(text: str) -> list[str]:
    """Split text into newline-terminated line tokens.

    The last token carries no newline when the text does not end with one.
    Only ``\\n`` separates lines; a ``\\r`` stays part of its line.

    Examples:
        >>> split_line_tokens("a\\nb")
        ['a\\n', 'b']
        >>> split_line_tokens("a\\n")
        ['a\\n']
    """
    if not text:
        return []
    parts = text.split("\n")
    tokens = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        tokens.append(parts[-1])
    return tokens


def split_word_tokens(text: str) -> list[str]:
    """Split a line into words, whitespace runs and punctuation characters."""
    return WORD_TOKEN_PATTERN.findall(text)


class SequenceLineDiffer(LineDiffer):
    """Line differ built on difflib.SequenceMatcher."""

    def diff(self, old: str, new: str) -> list[ChangeRun]:
        old_tokens = split_line_tokens(old)
        new_tokens = split_line_tokens(new)
        matcher = SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

        runs: list[ChangeRun] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                runs.append(ChangeRun(ChangeKind.EQUAL, "".join(old_tokens[i1:i2])))
                continue
            if tag in ("delete", "replace"):
                runs.append(ChangeRun(ChangeKind.REMOVED, "".join(old_tokens[i1:i2])))
            if tag in ("insert", "replace"):
                runs.append(ChangeRun(ChangeKind.ADDED, "".join(new_tokens[j1:j2])))
        return runs


class SequenceWordDiffer(WordDiffer):
    """Word differ built on difflib.SequenceMatcher."""

    def diff(self, a: str, b: str) -> list[InlineSpan]:
        a_tokens = split_word_tokens(a)
        b_tokens = split_word_tokens(b)
        matcher = SequenceMatcher(None, a_tokens, b_tokens, autojunk=False)

        spans: list[InlineSpan] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                _append_span(spans, "".join(a_tokens[i1:i2]), ChangeKind.EQUAL)
                continue
            if tag in ("delete", "replace"):
                _append_span(spans, "".join(a_tokens[i1:i2]), ChangeKind.REMOVED)
            if tag in ("insert", "replace"):
                _append_span(spans, "".join(b_tokens[j1:j2]), ChangeKind.ADDED)
        return spans


def _append_span(spans: list[InlineSpan], text: str, kind: ChangeKind) -> None:
    """Append a span, merging it into the previous one when the kinds match."""
    if not text:
        return
    if spans and spans[-1].kind is kind:
        spans[-1] = InlineSpan(spans[-1].text + text, kind)
    else:
        spans.append(InlineSpan(text, kind))


_default_line_differ = SequenceLineDiffer()
_default_word_differ = SequenceWordDiffer()


def diff_lines(old: str, new: str) -> list[ChangeRun]:
    """Diff two texts line by line with the default line differ."""
    return _default_line_differ.diff(old, new)


def diff_words(a: str, b: str) -> list[InlineSpan]:
    """Diff two lines word by word with the default word differ."""
    return _default_word_differ.diff(a, b)
