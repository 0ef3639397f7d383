"""
Main Textual application for the Diff Viewer.

This is the entry point for the TUI that compares two files block by block.
JSON files are pretty-printed before comparison and their blocks are shown
as expandable trees when they parse.
"""

import argparse
import os
import sys

from loguru import logger
from textual.app import App
from textual.binding import Binding

from diffview.diff_engine import (
    ComparisonSession,
    DiffOptions,
    FileContent,
    FileTooLarge,
    IngestOptions,
    JsonParseScope,
    ViewMode,
    is_json_pair,
    load_file,
    prepare_content,
)
from diffview.tui.views.diff_screen import DiffScreen
from diffview.utils.logging import configure_logging


class DiffViewerApp(App):
    """A Textual app for comparing two files."""

    TITLE = "Diff Viewer"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    /* Tree styling */
    Tree {
        background: $surface;
    }

    Tree > .tree--cursor {
        background: $secondary;
    }

    Tree > .tree--guides {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        left: FileContent,
        right: FileContent,
        options: DiffOptions | None = None,
    ):
        """Initialize the app with both sides of the comparison.

        Args:
            left: The original file, already prepared for diffing.
            right: The modified file, already prepared for diffing.
            options: Diff options; JSON rendering defaults to on when either
                file is JSON.
        """
        super().__init__()
        self._left = left
        self._right = right
        if options is None:
            options = DiffOptions(is_json=is_json_pair(left, right))
        self.session = ComparisonSession(left.content, right.content, options)

    def on_mount(self) -> None:
        """Push the diff screen."""
        self.title = f"Diff Viewer - {self._left.name} ↔ {self._right.name}"
        logger.debug("Opening diff screen with {count} blocks", count=len(self.session.blocks))
        self.push_screen(DiffScreen(self.session, self._left.name, self._right.name))


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare two text, CSV or JSON files in a terminal UI."
    )
    parser.add_argument("old", help="Path to the original file")
    parser.add_argument("new", help="Path to the modified file")
    parser.add_argument(
        "-o",
        "--only-diffs",
        action="store_true",
        help="Start with unchanged context lines hidden",
    )
    parser.add_argument(
        "-w",
        "--ignore-whitespace",
        action="store_true",
        help="Ignore leading/trailing whitespace of lines",
    )
    parser.add_argument(
        "--view",
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.SPLIT.value,
        help="Initial layout (default: split)",
    )
    parser.add_argument(
        "--json-scope",
        choices=[scope.value for scope in JsonParseScope],
        default=JsonParseScope.FIRST_LINE.value,
        help="Text of a block parsed as JSON (default: first_line)",
    )
    parser.add_argument(
        "--no-pretty-json",
        action="store_true",
        help="Do not pretty-print JSON files before comparing",
    )
    parser.add_argument("--sort-lines", action="store_true", help="Sort lines before comparing")
    parser.add_argument(
        "--header-rows",
        type=int,
        default=0,
        help="Leading lines kept unsorted when sorting (default: 0)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write debug logs to this file",
    )
    args = parser.parse_args()

    for path in (args.old, args.new):
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)
        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    if args.log_file:
        configure_logging("DEBUG", args.log_file)

    ingest = IngestOptions(
        pretty_print_json=not args.no_pretty_json,
        sort_lines=args.sort_lines,
        header_rows=args.header_rows,
    )
    try:
        left = prepare_content(load_file(args.old, ingest.max_content_size), ingest)
        right = prepare_content(load_file(args.new, ingest.max_content_size), ingest)
    except FileTooLarge as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    options = DiffOptions(
        show_only_diffs=args.only_diffs,
        ignore_whitespace=args.ignore_whitespace,
        is_json=is_json_pair(left, right),
        view_mode=ViewMode(args.view),
        json_parse_scope=JsonParseScope(args.json_scope),
    )
    app = DiffViewerApp(left, right, options)
    app.run()


if __name__ == "__main__":
    main()
