"""
Diff Screen for navigating the difference blocks of a comparison.

Displays every block of the session in order with a status line showing the
current difference, and provides toggles for the diff options.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, Tree
from textual.widgets.tree import TreeNode

from diffview.diff_engine.session import IDENTICAL_MESSAGE, ComparisonSession
from diffview.tui.mixins import VimNavigationMixin
from diffview.tui.widgets import DiffBlockView, JsonTreePanel


class DiffScreen(VimNavigationMixin, Screen):
    """Block-by-block diff view.

    This screen owns no diff state of its own: the comparison session holds
    the options, the navigation index and the JSON expansion set, and the
    screen re-renders from it after every action.
    """

    CSS = """
    DiffScreen {
        layout: vertical;
    }

    #diff-status {
        height: 1;
        padding: 0 1;
        background: $primary-darken-1;
        color: $text;
    }

    #diff-blocks {
        height: 1fr;
        padding: 0 1;
    }

    .identical {
        width: 100%;
        padding: 2;
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS + [
        Binding("n", "next_diff", "Next"),
        Binding("p", "previous_diff", "Previous"),
        Binding("N", "previous_diff", "Previous", show=False),
        Binding("o", "toggle_only_diffs", "Only Diffs"),
        Binding("w", "toggle_whitespace", "Ignore Whitespace"),
        Binding("v", "toggle_view_mode", "Split/Unified"),
        Binding("e", "expand_all", "Expand All"),
        Binding("c", "collapse_all", "Collapse All"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: ComparisonSession,
        left_name: str = "original",
        right_name: str = "modified",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the DiffScreen.

        Args:
            session: The comparison session to display.
            left_name: Name of the original file.
            right_name: Name of the modified file.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._session = session
        self._left_name = left_name
        self._right_name = right_name

    def compose(self) -> ComposeResult:
        """Compose the status line and the scrollable block list."""
        yield Header()
        yield Static("", id="diff-status")
        yield VerticalScroll(id="diff-blocks")
        yield Footer()

    async def on_mount(self) -> None:
        """Render the blocks when the screen is mounted."""
        self.title = f"{self._left_name} ↔ {self._right_name}"
        await self.refresh_blocks()

    async def refresh_blocks(self) -> None:
        """Rebuild the block widgets from the session."""
        container = self.query_one("#diff-blocks", VerticalScroll)
        await container.remove_children()

        if self._session.is_identical:
            await container.mount(Static(IDENTICAL_MESSAGE, classes="identical"))
        else:
            views = self._session.render_all()
            await container.mount_all(
                DiffBlockView(block, view, idx, id=f"block-{idx}")
                for idx, (block, view) in enumerate(zip(self._session.blocks, views))
            )
        self._update_current()

    def _update_current(self, scroll: bool = False) -> None:
        """Highlight the current block and refresh the status line."""
        self.query_one("#diff-status", Static).update(self._status_line())
        current = self._session.current_index
        for widget in self.query(DiffBlockView):
            widget.set_class(widget.id == f"block-{current}", "current")
            if scroll and widget.id == f"block-{current}":
                self.query_one("#diff-blocks", VerticalScroll).scroll_to_widget(widget, top=True)

    def _status_line(self) -> str:
        options = self._session.options
        flags = [options.view_mode.value]
        if options.show_only_diffs:
            flags.append("only diffs")
        if options.ignore_whitespace:
            flags.append("ignore whitespace")
        if options.is_json:
            flags.append("json")
        return f"{self._session.status_text}  [{', '.join(flags)}]"

    def action_next_diff(self) -> None:
        """Scroll to the next difference, wrapping at the end."""
        self._session.navigate("next")
        self._update_current(scroll=True)

    def action_previous_diff(self) -> None:
        """Scroll to the previous difference, wrapping at the start."""
        self._session.navigate("previous")
        self._update_current(scroll=True)

    async def action_toggle_only_diffs(self) -> None:
        """Toggle dropping of unchanged context lines."""
        enabled = self._session.toggle_option("show_only_diffs")
        await self.refresh_blocks()
        self.notify(f"Only differences {'enabled' if enabled else 'disabled'}")

    async def action_toggle_whitespace(self) -> None:
        """Toggle whitespace-insensitive comparison."""
        enabled = self._session.toggle_option("ignore_whitespace")
        await self.refresh_blocks()
        self.notify(f"Ignore whitespace {'enabled' if enabled else 'disabled'}")

    async def action_toggle_view_mode(self) -> None:
        """Switch between split and unified layout."""
        mode = self._session.toggle_view_mode()
        await self.refresh_blocks()
        self.notify(f"{mode.value.capitalize()} view")

    async def action_expand_all(self) -> None:
        """Expand all JSON nodes in every block."""
        self._session.expand_all()
        await self.refresh_blocks()
        self.notify("Expanded all nodes")

    async def action_collapse_all(self) -> None:
        """Collapse all JSON nodes in every block."""
        self._session.collapse_all()
        await self.refresh_blocks()
        self.notify("Collapsed all nodes")

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()

    def on_tree_node_expanded(self, event: Tree.NodeExpanded) -> None:
        """Record an expanded JSON node and expand the same path in other blocks."""
        self._mirror_expansion(event.node, True)

    def on_tree_node_collapsed(self, event: Tree.NodeCollapsed) -> None:
        """Record a collapsed JSON node and collapse the same path in other blocks."""
        self._mirror_expansion(event.node, False)

    def _mirror_expansion(self, node: TreeNode, expanded: bool) -> None:
        path = node.data
        if path is None or node.is_expanded != expanded:
            return
        self._session.set_expanded(path, expanded)
        # Every block shares one expansion set
        for tree in self.query(JsonTreePanel):
            if tree is not node.tree:
                tree.set_path_expanded(path, expanded)

    @property
    def session(self) -> ComparisonSession:
        """Get the comparison session."""
        return self._session
