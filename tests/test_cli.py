"""Tests for CLI functionality in diffview/main.py."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

# Path to the module
CLI_MODULE = "diffview.main"


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the diffview CLI with given arguments."""
    return subprocess.run(
        [sys.executable, "-m", CLI_MODULE, *args],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent
    )


class TestCLIBasic:
    """Basic CLI functionality tests."""

    def test_help_flag(self):
        """--help should show usage."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_no_command_shows_help(self):
        """Missing command should print help and fail."""
        result = run_cli()
        assert result.returncode == 1
        assert "usage" in result.stdout.lower()

    def test_file_not_found_error(self, text_pair):
        """Non-existent file should error with message."""
        result = run_cli("show", "/nonexistent/file.txt", str(text_pair[1]))
        assert result.returncode == 1
        assert "not found" in result.stderr.lower()

    def test_invalid_view_choice(self, text_pair):
        """Unknown --view values are rejected by argparse."""
        result = run_cli("show", *map(str, text_pair), "--view", "diagonal")
        assert result.returncode != 0


class TestShowCommand:
    """Tests for the show command."""

    def test_show_text_diff(self, text_pair):
        result = run_cli("show", *map(str, text_pair), "--view", "unified")
        assert result.returncode == 0
        assert "Difference 1 of 1" in result.stdout
        assert "- b" in result.stdout
        assert "+ bx" in result.stdout

    def test_identical_files(self, write_file):
        old = write_file("a.txt", "same\n")
        new = write_file("b.txt", "same\n")
        result = run_cli("show", str(old), str(new))
        assert result.returncode == 0
        assert "The files are identical" in result.stdout

    def test_pretty_printed_json_shows_flat_lines(self, json_pair):
        result = run_cli("show", *map(str, json_pair), "--view", "unified")
        assert result.returncode == 0
        assert '"h": 3' in result.stdout

    def test_json_tree_with_block_scope(self, write_file):
        old = write_file("a.json", '{"a": 1}')
        new = write_file("b.json", '{"a": 2}')
        result = run_cli("show", str(old), str(new), "--json-scope", "block", "--expand-all")
        assert result.returncode == 0
        assert "a: 2" in result.stdout

    def test_compact_json_renders_tree(self, json_pair):
        result = run_cli("show", *map(str, json_pair), "--no-pretty-json", "--expand-all")
        assert result.returncode == 0
        assert 'name: "widget"' in result.stdout

    def test_file_too_large(self, write_file):
        """Oversized files fail before any diffing."""
        big = write_file("big.txt", "x" * (10 * 1024 * 1024 + 1))
        small = write_file("small.txt", "x")
        result = run_cli("show", str(big), str(small))
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "10MB" in result.stderr


class TestBlocksCommand:
    """Tests for the blocks command."""

    def test_blocks_json_output(self, text_pair):
        result = run_cli("blocks", *map(str, text_pair))
        assert result.returncode == 0

        data = json.loads(result.stdout)
        assert data["identical"] is False
        lines = data["blocks"][0]["lines"]
        assert [(l["kind"], l["text"]) for l in lines] == [
            ("unchanged", "a"),
            ("removed", "b"),
            ("added", "x"),
            ("unchanged", "c"),
        ]
        assert lines[2]["inline_diff"] == [
            {"text": "b", "kind": "removed"},
            {"text": "x", "kind": "added"},
        ]

    def test_only_diffs(self, text_pair):
        result = run_cli("blocks", *map(str, text_pair), "--only-diffs")
        data = json.loads(result.stdout)
        assert [l["text"] for l in data["blocks"][0]["lines"]] == ["b", "x"]

    def test_ignore_whitespace(self, write_file):
        old = write_file("a.txt", "a\n  b\n")
        new = write_file("b.txt", "a\nb\n")
        data = json.loads(run_cli("blocks", str(old), str(new), "-w").stdout)
        assert data == {"identical": True, "blocks": []}

    def test_sort_lines(self, write_file):
        old = write_file("a.csv", "id\n2\n1\n")
        new = write_file("b.csv", "id\n1\n2\n")
        data = json.loads(run_cli("blocks", str(old), str(new), "--sort-lines", "--header-rows", "1").stdout)
        assert data["identical"] is True


class TestStatsCommand:
    """Tests for the stats command."""

    def test_stats_counts(self, text_pair):
        result = run_cli("stats", *map(str, text_pair))
        assert result.returncode == 0
        assert "DIFF STATISTICS" in result.stdout
        assert "Differences:        1" in result.stdout
        assert "Added lines:        1" in result.stdout
        assert "Removed lines:      1" in result.stdout
        assert "Inline-paired:      1" in result.stdout


class TestLogging:
    """Tests for the logging flags."""

    def test_quiet_by_default(self, text_pair):
        result = run_cli("blocks", *map(str, text_pair))
        assert result.stderr == ""

    def test_debug_logs_to_stderr(self, text_pair):
        result = run_cli("--debug", "blocks", *map(str, text_pair))
        assert result.returncode == 0
        assert "DEBUG" in result.stderr
        assert "Assembled 1 blocks" in result.stderr

    def test_log_file(self, text_pair, tmp_path):
        log_file = tmp_path / "logs" / "diffview.log"
        result = run_cli("--log-file", str(log_file), "blocks", *map(str, text_pair))
        assert result.returncode == 0
        assert log_file.exists()
        assert result.stderr == ""
