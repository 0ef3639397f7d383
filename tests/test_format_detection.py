"""Tests for format detection in diffview/diff_engine/format_detector.py."""

from __future__ import annotations

import pytest

from diffview.diff_engine import EXTENSION_MAP, SUPPORTED_FORMATS, detect_format, is_json_file
from diffview.diff_engine.format_detector import guess_mime_type


class TestDetectFormat:
    """Tests for detect_format() function."""

    def test_detect_json_extension(self):
        assert detect_format("data.json") == "json"

    def test_detect_csv_extension(self):
        assert detect_format("table.csv") == "csv"
        assert detect_format("table.tsv") == "csv"

    def test_detect_text_extension(self):
        assert detect_format("notes.txt") == "text"

    def test_detect_uppercase_extension(self):
        assert detect_format("DATA.JSON") == "json"

    def test_detect_with_directories(self):
        assert detect_format("/tmp/some.dir/data.json") == "json"

    def test_unknown_extension_is_text(self):
        assert detect_format("script.py") == "text"
        assert detect_format("README") == "text"

    def test_json_mime_type_wins(self):
        assert detect_format("upload.bin", "application/json") == "json"

    def test_other_mime_type_uses_extension(self):
        assert detect_format("data.json", "text/plain") == "json"


class TestMimeTypes:
    """Tests for guess_mime_type() and is_json_file()."""

    def test_json_mime_type(self):
        assert guess_mime_type("data.json") == "application/json"

    def test_unknown_defaults_to_plain_text(self):
        assert guess_mime_type("no_extension") == "text/plain"

    @pytest.mark.parametrize(
        "name, mime_type, expected",
        [
            ("a.json", None, True),
            ("a.txt", None, False),
            ("a.txt", "application/json", True),
            ("a.csv", "text/csv", False),
        ],
    )
    def test_is_json_file(self, name, mime_type, expected):
        assert is_json_file(name, mime_type) is expected


class TestFormatConstants:
    """Tests for the exported constants."""

    def test_extension_map_targets_are_supported(self):
        assert set(EXTENSION_MAP.values()) <= SUPPORTED_FORMATS

    def test_supported_formats(self):
        assert SUPPORTED_FORMATS == {"json", "csv", "text"}
