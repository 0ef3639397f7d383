"""Mixins for the TUI application."""

from diffview.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "VimNavigationMixin",
]
