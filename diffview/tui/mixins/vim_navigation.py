"""
Vim Navigation Mixin for vim-style keybindings.

Provides j/k/g/G navigation: a focused JSON tree moves its cursor, anything
else scrolls the screen's scrollable diff container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Tree

if TYPE_CHECKING:
    from textual.widget import Widget


class VimNavigationMixin:
    """Mixin providing vim-style navigation keybindings.

    This mixin adds vim keybindings:
    - j/k: Move tree cursor or scroll down/up
    - g: Jump to the top
    - G: Jump to the bottom

    Screens using it set SCROLL_CONTAINER_ID to the id of their
    VerticalScroll.

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    SCROLL_CONTAINER_ID: str = "diff-blocks"

    def _get_focused_tree(self) -> Tree | None:
        """Return the focused widget if it is a tree."""
        focused = self.focused
        if isinstance(focused, Tree):
            return focused
        return None

    def _get_scroll_container(self) -> Widget | None:
        try:
            return self.query_one(f"#{self.SCROLL_CONTAINER_ID}", VerticalScroll)
        except NoMatches:
            return None

    def action_vim_down(self) -> None:
        """Move cursor or scroll down (vim j key)."""
        tree = self._get_focused_tree()
        if tree is not None:
            tree.action_cursor_down()
            return
        container = self._get_scroll_container()
        if container is not None:
            container.scroll_down()

    def action_vim_up(self) -> None:
        """Move cursor or scroll up (vim k key)."""
        tree = self._get_focused_tree()
        if tree is not None:
            tree.action_cursor_up()
            return
        container = self._get_scroll_container()
        if container is not None:
            container.scroll_up()

    def action_vim_top(self) -> None:
        """Jump to the top (vim g)."""
        container = self._get_scroll_container()
        if container is not None:
            container.scroll_home()

    def action_vim_bottom(self) -> None:
        """Jump to the bottom (vim G)."""
        container = self._get_scroll_container()
        if container is not None:
            container.scroll_end()
