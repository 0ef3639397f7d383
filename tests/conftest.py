"""Pytest configuration and shared fixtures for diffview tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from diffview.diff_engine import DiffBlock, compute_blocks


@pytest.fixture
def simple_texts() -> tuple[str, str]:
    """One changed line between two lines of context."""
    return "a\nb\nc", "a\nx\nc"


@pytest.fixture
def two_change_texts() -> tuple[str, str]:
    """Two separate changes, producing two blocks."""
    return "a\nb\nc\nd\ne", "a\nB\nc\nd\nE"


@pytest.fixture
def simple_block(simple_texts) -> DiffBlock:
    """The single block of the simple texts, with context."""
    blocks = compute_blocks(*simple_texts)
    assert len(blocks) == 1
    return blocks[0]


@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str], Path]:
    """Return a helper that writes a text file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def text_pair(write_file) -> tuple[Path, Path]:
    """Two text files differing in one line."""
    return write_file("old.txt", "a\nb\nc\n"), write_file("new.txt", "a\nx\nc\n")


@pytest.fixture
def json_pair(write_file) -> tuple[Path, Path]:
    """Two compact JSON files differing in one nested value."""
    old = {"name": "widget", "tags": ["a", "b"], "size": {"w": 1, "h": 2}}
    new = {"name": "widget", "tags": ["a", "c"], "size": {"w": 1, "h": 3}}
    return (
        write_file("old.json", json.dumps(old)),
        write_file("new.json", json.dumps(new)),
    )
