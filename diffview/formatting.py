"""
Rich text formatting of rendered diff views.

Shared by the command line output and the TUI widgets so both show the same
colors for added, removed and unchanged content.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from diffview.diff_engine.json_tree import JsonRenderNode
from diffview.diff_engine.models import ChangeKind, LineKind, ViewMode
from diffview.diff_engine.render import BlockView, FlatView, JsonView, RenderedRow


# Line background per kind
LINE_STYLES: dict[LineKind, str] = {
    LineKind.ADDED: "on #12361f",
    LineKind.REMOVED: "on #4b1818",
    LineKind.UNCHANGED: "",
}

# Stronger highlight for inline word changes
SPAN_STYLES: dict[ChangeKind, str] = {
    ChangeKind.ADDED: "bold on #1f6f3a",
    ChangeKind.REMOVED: "bold strike on #8b2323",
    ChangeKind.EQUAL: "",
}

LINE_MARKERS: dict[LineKind, str] = {
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
    LineKind.UNCHANGED: " ",
}

GUTTER_WIDTH = 5


def row_text(row: RenderedRow, show_marker: bool = False) -> Text:
    """Build the text of one row: gutter number, optional marker, segments."""
    text = Text(style=LINE_STYLES[row.kind])
    number = "" if row.number is None else str(row.number)
    text.append(f"{number:>{GUTTER_WIDTH}} ", style="dim")
    if show_marker:
        text.append(f"{LINE_MARKERS[row.kind]} ", style="bold")
    for segment in row.segments:
        text.append(segment.text, style=SPAN_STYLES[segment.kind])
    return text


def rows_text(rows: list[RenderedRow], show_marker: bool = False) -> Text:
    return Text("\n").join(row_text(row, show_marker) for row in rows)


def json_label(node: JsonRenderNode) -> Text:
    """Label of a JSON node: ``key: `` followed by its literal or opening token."""
    text = Text(style=LINE_STYLES[node.kind])
    if node.key is not None:
        text.append(f"{node.key}: ", style="bold")
    text.append(node.opening if node.is_composite else node.literal or "")
    return text


def json_tree_text(node: JsonRenderNode, indent: int = 0) -> Text:
    """Render a JSON tree as indented text, honoring the expanded flags."""
    pad = "  " * indent
    marker = ("v " if node.expanded else "> ") if node.is_composite else "  "
    text = Text(pad + marker)
    text.append_text(json_label(node))
    if not node.is_composite:
        return text
    if node.expanded:
        for child in node.children:
            text.append("\n")
            text.append_text(json_tree_text(child, indent + 1))
    text.append("\n" + pad + "  ")
    text.append(node.closing or "", style=LINE_STYLES[node.kind])
    return text


def flat_view_renderable(view: FlatView) -> Text | Table:
    """Rich renderable for a flat view: a text block or a two-column table."""
    if view.view_mode is ViewMode.UNIFIED:
        return rows_text(view.rows, show_marker=True)

    table = Table.grid(expand=True, padding=(0, 1))
    table.add_column(ratio=1)
    table.add_column(ratio=1)
    table.add_row(rows_text(view.left_rows), rows_text(view.right_rows))
    return table


def view_renderable(view: BlockView) -> Text | Table:
    """Rich renderable for any block view."""
    if isinstance(view, JsonView):
        return json_tree_text(view.root)
    return flat_view_renderable(view)
