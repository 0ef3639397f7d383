"""TUI widgets for the Diff Viewer."""

from diffview.tui.widgets.diff_block_view import DiffBlockView
from diffview.tui.widgets.json_tree_panel import JsonTreePanel

__all__ = [
    "DiffBlockView",
    "JsonTreePanel",
]
