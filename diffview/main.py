#!/usr/bin/env python3
"""
Diff Viewer CLI

Compare two text files and print the differences as navigable blocks.
JSON files are pretty-printed before comparison and can be shown as trees.

Usage:
    python -m diffview.main show <old> <new>     Print the diff blocks
    python -m diffview.main stats <old> <new>    Show change statistics
    python -m diffview.main blocks <old> <new>   Dump the blocks as JSON

For the interactive viewer run:
    python -m diffview.tui.app <old> <new>
"""

import argparse
import json
import os
import sys

from loguru import logger
from rich.console import Console
from rich.rule import Rule

from diffview.diff_engine import (
    IDENTICAL_MESSAGE,
    ComparisonSession,
    DiffOptions,
    FileContent,
    FileTooLarge,
    IngestOptions,
    JsonParseScope,
    LineKind,
    ViewMode,
    is_json_pair,
    load_file,
    prepare_content,
)
from diffview.formatting import view_renderable
from diffview.utils.logging import configure_logging


def check_path(path: str) -> None:
    """Exit with an error if the path is missing or unreadable."""
    if not os.path.exists(path):
        print(f"Error: Path not found: {path}", file=sys.stderr)
        sys.exit(1)
    if not os.access(path, os.R_OK):
        print(f"Error: Permission denied: {path}", file=sys.stderr)
        sys.exit(1)


def load_pair(args) -> tuple[FileContent, FileContent]:
    """Load and prepare both files named on the command line."""
    check_path(args.old)
    check_path(args.new)

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
    return left, right


def build_session(args) -> ComparisonSession:
    """Create a comparison session from the parsed arguments."""
    left, right = load_pair(args)
    is_json = is_json_pair(left, right) if args.json is None else args.json
    options = DiffOptions(
        show_only_diffs=args.only_diffs,
        ignore_whitespace=args.ignore_whitespace,
        is_json=is_json,
        view_mode=ViewMode(args.view),
        json_parse_scope=JsonParseScope(args.json_scope),
    )
    logger.debug("Comparing {left} with {right}: {options}", left=left.name, right=right.name, options=options)
    return ComparisonSession(left.content, right.content, options)


# ============== Commands ==============

def cmd_show(args):
    """Print every diff block."""
    session = build_session(args)
    console = Console(highlight=False)

    if session.is_identical:
        console.print(IDENTICAL_MESSAGE)
        return

    if args.expand_all:
        session.expand_all()

    total = len(session.blocks)
    for idx, block in enumerate(session.blocks):
        title = f"Difference {idx + 1} of {total} (lines {block.start_line}-{block.end_line})"
        console.print(Rule(title, style="dim"))
        console.print(view_renderable(session.render(block)))


def cmd_stats(args):
    """Print change statistics."""
    session = build_session(args)
    blocks = session.blocks

    added = sum(block.count(LineKind.ADDED) for block in blocks)
    removed = sum(block.count(LineKind.REMOVED) for block in blocks)
    unchanged = sum(block.count(LineKind.UNCHANGED) for block in blocks)
    paired = sum(1 for block in blocks for line in block.lines if line.inline_diff is not None)

    print("=" * 40)
    print("DIFF STATISTICS")
    print("=" * 40)
    print(f"  Differences:        {len(blocks):,}")
    print(f"  Added lines:        {added:,}")
    print(f"  Removed lines:      {removed:,}")
    print(f"  Context lines:      {unchanged:,}")
    print(f"  Inline-paired:      {paired:,}")
    if session.is_identical:
        print(f"\n{IDENTICAL_MESSAGE}")
    print("=" * 40)


def cmd_blocks(args):
    """Dump the blocks as JSON."""
    session = build_session(args)
    data = {
        "identical": session.is_identical,
        "blocks": [block.to_dict() for block in session.blocks],
    }
    print(json.dumps(data, indent=2, ensure_ascii=False))


def add_compare_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every comparison command."""
    parser.add_argument('old', help='Original file')
    parser.add_argument('new', help='Modified file')
    parser.add_argument('-o', '--only-diffs', action='store_true', help='Show only differences, no context lines')
    parser.add_argument('-w', '--ignore-whitespace', action='store_true', help='Ignore leading/trailing whitespace')
    parser.add_argument(
        '--view',
        choices=[mode.value for mode in ViewMode],
        default=ViewMode.SPLIT.value,
        help='Layout of the diff (default: split)'
    )
    parser.add_argument(
        '--json',
        dest='json',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Render blocks as JSON trees (default: when either file is JSON)'
    )
    parser.add_argument(
        '--json-scope',
        choices=[scope.value for scope in JsonParseScope],
        default=JsonParseScope.FIRST_LINE.value,
        help='Text of a block parsed as JSON (default: first_line)'
    )
    parser.add_argument('--no-pretty-json', action='store_true', help='Do not pretty-print JSON files')
    parser.add_argument('--sort-lines', action='store_true', help='Sort lines before comparing')
    parser.add_argument('--header-rows', type=int, default=0, help='Leading lines kept unsorted (default: 0)')


def main():
    parser = argparse.ArgumentParser(
        description="Diff Viewer - Compare text, CSV and JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Write logs to this file instead of stderr')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Show command
    show_parser = subparsers.add_parser('show', help='Print the diff blocks')
    add_compare_arguments(show_parser)
    show_parser.add_argument('-e', '--expand-all', action='store_true', help='Expand all JSON tree nodes')
    show_parser.set_defaults(func=cmd_show)

    # Stats command
    stats_parser = subparsers.add_parser('stats', help='Show change statistics')
    add_compare_arguments(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # Blocks command
    blocks_parser = subparsers.add_parser('blocks', help='Dump the blocks as JSON')
    add_compare_arguments(blocks_parser)
    blocks_parser.set_defaults(func=cmd_blocks)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.debug or args.log_file:
        configure_logging("DEBUG" if args.debug else "INFO", args.log_file)

    args.func(args)


if __name__ == "__main__":
    main()
