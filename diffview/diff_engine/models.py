"""
Data model for the diff engine.

Change runs come out of the line differ, line records come out of the
normalizer, and diff blocks come out of the assembler. Everything here is
recomputed from scratch for every comparison; none of it is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ChangeKind(str, Enum):
    """Kind of a change run or an inline word span."""

    ADDED = "added"
    REMOVED = "removed"
    EQUAL = "equal"


class LineKind(str, Enum):
    """Kind of a single line record."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"

    @classmethod
    def from_change(cls, kind: ChangeKind) -> "LineKind":
        """Map a run kind onto the line kind it produces."""
        if kind is ChangeKind.ADDED:
            return cls.ADDED
        if kind is ChangeKind.REMOVED:
            return cls.REMOVED
        return cls.UNCHANGED

    @property
    def is_change(self) -> bool:
        return self is not LineKind.UNCHANGED

    def opposite(self) -> "LineKind | None":
        """Return the opposite change kind, or None for unchanged lines."""
        if self is LineKind.ADDED:
            return LineKind.REMOVED
        if self is LineKind.REMOVED:
            return LineKind.ADDED
        return None


class ViewMode(str, Enum):
    """Layout used by the flat renderer."""

    UNIFIED = "unified"
    SPLIT = "split"


class JsonParseScope(str, Enum):
    """Which text of a block the JSON renderer tries to parse.

    FIRST_LINE parses only the first line record of the block, which means
    pretty-printed JSON spread over several lines falls back to the flat view.
    BLOCK rebuilds the block's text for one side and parses that instead.
    """

    FIRST_LINE = "first_line"
    BLOCK = "block"


@dataclass(frozen=True)
class ChangeRun:
    """A maximal run of lines of a single kind, as produced by a line differ.

    Attributes:
        kind: Whether the run was added, removed or is shared by both sides.
        text: The raw run text, one or more complete lines including newlines.
    """

    kind: ChangeKind
    text: str


@dataclass(frozen=True)
class InlineSpan:
    """A word-level span inside a paired changed line."""

    text: str
    kind: ChangeKind


@dataclass
class LineRecord:
    """One line of either or both inputs.

    Attributes:
        kind: added, removed or unchanged.
        text: Line content without the trailing newline.
        left_number: 1-based line number in the original text, None for added lines.
        right_number: 1-based line number in the modified text, None for removed lines.
        inline_diff: Word-level spans, present only when the line was paired
            with an adjacent line of the opposite kind.
    """

    kind: LineKind
    text: str
    left_number: int | None = None
    right_number: int | None = None
    inline_diff: list[InlineSpan] | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the record."""
        data: dict = {
            "kind": self.kind.value,
            "text": self.text,
            "left_number": self.left_number,
            "right_number": self.right_number,
        }
        if self.inline_diff is not None:
            data["inline_diff"] = [
                {"text": span.text, "kind": span.kind.value} for span in self.inline_diff
            ]
        return data


def _first_known_number(line: LineRecord) -> int:
    return line.left_number or line.right_number or 0


@dataclass
class DiffBlock:
    """A maximal unit of display: change runs plus their trailing context.

    Attributes:
        lines: Ordered, non-empty list of line records.
    """

    lines: list[LineRecord] = field(default_factory=list)

    @property
    def start_line(self) -> int:
        """First known line number of the block, used for scroll targeting."""
        return _first_known_number(self.lines[0]) if self.lines else 0

    @property
    def end_line(self) -> int:
        """Last known line number of the block."""
        return _first_known_number(self.lines[-1]) if self.lines else 0

    @property
    def kind(self) -> LineKind:
        """Kind of the block's first line, used to tag JSON renderings."""
        return self.lines[0].kind

    def count(self, kind: LineKind) -> int:
        return sum(1 for line in self.lines if line.kind is kind)

    def to_dict(self) -> dict:
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass
class DiffOptions:
    """Options for a comparison session.

    Attributes:
        show_only_diffs: Drop unchanged context lines from the blocks.
        ignore_whitespace: Strip leading/trailing whitespace of every line before diffing.
        is_json: Render blocks through the JSON tree renderer when they parse.
        view_mode: Unified or split layout for flat rendering.
        json_parse_scope: Which part of a block the JSON renderer parses.
    """

    show_only_diffs: bool = False
    ignore_whitespace: bool = False
    is_json: bool = False
    view_mode: ViewMode = ViewMode.SPLIT
    json_parse_scope: JsonParseScope = JsonParseScope.FIRST_LINE
