"""TUI views for the Diff Viewer."""

from diffview.tui.views.diff_screen import DiffScreen

__all__ = ["DiffScreen"]
