"""
Ingestion of compared files.

Reads files into FileContent records and prepares their text before it
reaches the diff engine: size ceiling, JSON pretty-printing, and optional
line sorting with a number of header rows kept in place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from diffview.diff_engine.errors import FileTooLarge
from diffview.diff_engine.format_detector import JSON_MIME_TYPE, guess_mime_type, is_json_file
from diffview.diff_engine.json_tree import decode_json


# Maximum content size accepted for a comparison (10MB)
MAX_CONTENT_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class FileContent:
    """Text of one compared side plus its metadata.

    Attributes:
        content: The full text.
        name: File name shown to the user.
        mime_type: MIME type, "application/json" for JSON files.
    """

    content: str
    name: str
    mime_type: str = "text/plain"

    @property
    def is_json(self) -> bool:
        return is_json_file(self.name, self.mime_type)


@dataclass
class IngestOptions:
    """Options applied to file content before diffing.

    Attributes:
        pretty_print_json: Reformat JSON files with an indent of 2.
        sort_lines: Sort the lines of both files.
        header_rows: Number of leading lines left unsorted.
        max_content_size: Size ceiling in characters.
    """

    pretty_print_json: bool = True
    sort_lines: bool = False
    header_rows: int = 0
    max_content_size: int = MAX_CONTENT_SIZE


def check_size(file: FileContent, limit: int = MAX_CONTENT_SIZE) -> None:
    """Raise FileTooLarge if the content exceeds the size ceiling."""
    size = len(file.content)
    if size > limit:
        raise FileTooLarge(file.name, size, limit)


def load_file(path: str | Path, limit: int = MAX_CONTENT_SIZE) -> FileContent:
    """Read a file from disk into a FileContent.

    Args:
        path: Path to the file.
        limit: Size ceiling in characters.

    Returns:
        The file's text, name and guessed MIME type.

    Raises:
        FileNotFoundError: If the file does not exist.
        FileTooLarge: If the file exceeds the size ceiling.
    """
    path = Path(path)
    # Checking the byte size first avoids decoding huge files
    byte_size = path.stat().st_size
    if byte_size > limit * 4:
        raise FileTooLarge(path.name, byte_size, limit)

    content = path.read_text(encoding="utf-8", errors="replace")
    file = FileContent(content=content, name=path.name, mime_type=guess_mime_type(path.name))
    check_size(file, limit)
    logger.debug("Loaded {name} ({size} chars, {mime})", name=file.name, size=len(content), mime=file.mime_type)
    return file


def format_json(content: str) -> str:
    """Pretty-print JSON with an indent of 2.

    Numbers are written the way a JavaScript round trip writes them, so
    ``1.0`` becomes ``1``. Invalid JSON, including NaN and Infinity, and
    documents nested too deeply to re-encode are returned unchanged.
    """
    try:
        parsed = decode_json(content)
        return json.dumps(parsed, indent=2, ensure_ascii=False)
    except ValueError:
        logger.debug("Content is not valid JSON, leaving it unformatted")
    except RecursionError:
        logger.debug("JSON is nested too deeply to pretty-print, leaving it unformatted")
    return content


def sort_content(content: str, header_rows: int = 0) -> str:
    """Sort the lines of the content, keeping the first header_rows in place.

    A trailing newline stays at the end instead of sorting to the top as an
    empty line.

    Examples:
        >>> sort_content("name\\nb\\na\\n", header_rows=1)
        'name\\na\\nb\\n'
    """
    trailing_newline = content.endswith("\n")
    lines = content.split("\n")
    if trailing_newline:
        lines.pop()
    header_rows = max(header_rows, 0)
    sorted_lines = lines[:header_rows] + sorted(lines[header_rows:])
    return "\n".join(sorted_lines) + ("\n" if trailing_newline else "")


def prepare_content(file: FileContent, options: IngestOptions | None = None) -> FileContent:
    """Apply the ingestion steps to one side.

    Raises:
        FileTooLarge: If the content exceeds the size ceiling.
    """
    options = options or IngestOptions()
    check_size(file, options.max_content_size)

    content = file.content
    mime_type = file.mime_type
    if file.is_json:
        mime_type = JSON_MIME_TYPE
        if options.pretty_print_json:
            content = format_json(content)
    if options.sort_lines:
        content = sort_content(content, options.header_rows)

    return replace(file, content=content, mime_type=mime_type)


def is_json_pair(left: FileContent, right: FileContent) -> bool:
    """A comparison is rendered as JSON when either side is JSON."""
    return left.is_json or right.is_json
