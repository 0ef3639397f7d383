"""
DiffBlockView widget for displaying one rendered diff block.

A block shows a small header with its line range followed by either a JSON
tree or the flat line view (unified, or split into two columns).
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from diffview.diff_engine.models import DiffBlock, ViewMode
from diffview.diff_engine.render import BlockView, FlatView, JsonView
from diffview.formatting import rows_text
from diffview.tui.widgets.json_tree_panel import JsonTreePanel


class DiffBlockView(Vertical):
    """A single diff block display widget."""

    DEFAULT_CSS = """
    DiffBlockView {
        height: auto;
        margin-bottom: 1;
        border: round $primary-darken-2;
    }

    DiffBlockView.current {
        border: round $accent;
    }

    DiffBlockView .block-header {
        color: $text-muted;
        height: 1;
    }

    DiffBlockView .split-row {
        height: auto;
    }

    DiffBlockView .split-side {
        width: 1fr;
        height: auto;
    }
    """

    def __init__(
        self,
        block: DiffBlock,
        view: BlockView,
        block_index: int = 0,
        **kwargs: Any,
    ) -> None:
        """Initialize the block view.

        Args:
            block: The block being displayed.
            view: The block rendered by the session.
            block_index: Position of the block in the block list.
            **kwargs: Additional arguments passed to Vertical.
        """
        super().__init__(**kwargs)
        self._block = block
        self._view = view
        self._block_index = block_index

    def compose(self) -> ComposeResult:
        """Compose the header and the rendered view."""
        yield Static(
            f"#{self._block_index + 1}  lines {self._block.start_line}-{self._block.end_line}",
            classes="block-header",
        )
        if isinstance(self._view, JsonView):
            yield JsonTreePanel(self._view.root, id=f"json-tree-{self._block_index}")
        elif self._view.view_mode is ViewMode.UNIFIED:
            yield Static(rows_text(self._view.rows, show_marker=True), classes="unified-lines")
        else:
            with Horizontal(classes="split-row"):
                yield Static(rows_text(self._view.left_rows), classes="split-side left-lines")
                yield Static(rows_text(self._view.right_rows), classes="split-side right-lines")

    @property
    def block(self) -> DiffBlock:
        return self._block

    @property
    def view(self) -> BlockView:
        return self._view

    @property
    def is_flat(self) -> bool:
        return isinstance(self._view, FlatView)
