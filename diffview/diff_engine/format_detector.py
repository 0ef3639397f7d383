"""
Format detection utilities for compared files.

This module decides whether a file is JSON, CSV or plain text from its name
and MIME type. JSON files get pretty-printed and may be rendered as trees.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".json": "json",
    ".csv": "csv",
    ".tsv": "csv",
    ".txt": "text",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["json", "csv", "text"])

JSON_MIME_TYPE = "application/json"
DEFAULT_MIME_TYPE = "text/plain"


def detect_format(name: str, mime_type: str | None = None) -> str:
    """Detect the content format from a file name and MIME type.

    Unknown extensions are treated as plain text.

    Args:
        name: File name or path.
        mime_type: MIME type reported for the file, if any.

    Returns:
        Format name: "json", "csv", or "text".

    Examples:
        >>> detect_format("data.json")
        'json'
        >>> detect_format("upload", "application/json")
        'json'
        >>> detect_format("notes.md")
        'text'
    """
    if mime_type == JSON_MIME_TYPE:
        return "json"
    extension = Path(name).suffix.lower()
    return EXTENSION_MAP.get(extension, "text")


def guess_mime_type(name: str) -> str:
    """Guess a MIME type from the file name, defaulting to text/plain."""
    if Path(name).suffix.lower() == ".json":
        return JSON_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(name)
    return mime_type or DEFAULT_MIME_TYPE


def is_json_file(name: str, mime_type: str | None = None) -> bool:
    """Return True if the file should be treated as JSON."""
    return detect_format(name, mime_type) == "json"
