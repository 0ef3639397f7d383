"""
Block rendering into presentation-neutral views.

A block renders either as a JSON tree (when the content is declared JSON and
the block parses) or as a flat line view in unified or split layout. The
views hold plain data; the TUI and the CLI turn them into rich text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from diffview.diff_engine.errors import InvalidJson
from diffview.diff_engine.json_tree import JsonRenderNode, JsonTreeRenderer
from diffview.diff_engine.models import (
    ChangeKind,
    DiffBlock,
    InlineSpan,
    JsonParseScope,
    LineKind,
    LineRecord,
    ViewMode,
)


@dataclass
class RenderedRow:
    """One displayed line: gutter number, kind and text segments."""

    number: int | None
    kind: LineKind
    segments: list[InlineSpan]

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass
class FlatView:
    """Flat line view of a block.

    Unified views fill ``rows``; split views fill ``left_rows`` and ``right_rows``.
    """

    view_mode: ViewMode
    rows: list[RenderedRow] = field(default_factory=list)
    left_rows: list[RenderedRow] = field(default_factory=list)
    right_rows: list[RenderedRow] = field(default_factory=list)


@dataclass
class JsonView:
    """JSON tree view of a block."""

    root: JsonRenderNode


BlockView = FlatView | JsonView


def _segments(line: LineRecord) -> list[InlineSpan]:
    if line.inline_diff:
        return list(line.inline_diff)
    return [InlineSpan(line.text, ChangeKind.EQUAL)]


def render_flat(block: DiffBlock, view_mode: ViewMode = ViewMode.SPLIT) -> FlatView:
    """Render a block as flat lines.

    Unified rows are numbered by the left number, or the right number for
    added lines. Split rows leave added lines out of the left side and
    removed lines out of the right side.
    """
    view = FlatView(view_mode=view_mode)
    if view_mode is ViewMode.UNIFIED:
        for line in block.lines:
            number = line.left_number or line.right_number
            view.rows.append(RenderedRow(number, line.kind, _segments(line)))
        return view

    for line in block.lines:
        if line.kind is not LineKind.ADDED:
            view.left_rows.append(RenderedRow(line.left_number, line.kind, _segments(line)))
        if line.kind is not LineKind.REMOVED:
            view.right_rows.append(RenderedRow(line.right_number, line.kind, _segments(line)))
    return view


def render(
    block: DiffBlock,
    is_json: bool = False,
    view_mode: ViewMode = ViewMode.SPLIT,
    renderer: JsonTreeRenderer | None = None,
    json_parse_scope: JsonParseScope = JsonParseScope.FIRST_LINE,
) -> BlockView:
    """Render one block.

    Args:
        block: The block to render.
        is_json: Try the JSON tree renderer first.
        view_mode: Layout of the flat view.
        renderer: JSON renderer holding the session's expansion set.
        json_parse_scope: Which text of the block the JSON renderer parses.

    Returns:
        A JsonView when JSON rendering is requested and the block parses,
        otherwise a FlatView.
    """
    if is_json:
        renderer = renderer or JsonTreeRenderer()
        try:
            return JsonView(root=renderer.render_block(block, json_parse_scope))
        except InvalidJson as e:
            logger.debug("Block {start} falls back to flat view: {error}", start=block.start_line, error=e)
    return render_flat(block, view_mode)
