"""
Line change normalizer.

Turns raw change runs into numbered line records. Two running counters track
the next line number on each side: equal runs advance both, added runs only
the right counter, removed runs only the left counter.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from diffview.diff_engine.models import ChangeKind, ChangeRun, LineKind, LineRecord


def split_run_lines(text: str) -> list[str]:
    """Split a run's text into lines, dropping the trailing empty artifact.

    A run ending in a newline must not produce a phantom empty final line.

    Examples:
        >>> split_run_lines("a\\nb\\n")
        ['a', 'b']
        >>> split_run_lines("a\\n\\n")
        ['a', '']
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineChangeNormalizer:
    """Numbers the lines of consecutive change runs.

    One normalizer instance covers exactly one comparison; the counters are
    never reset between runs.

    Attributes:
        left_number: Next line number on the original side.
        right_number: Next line number on the modified side.
    """

    def __init__(self) -> None:
        self.left_number: int = 1
        self.right_number: int = 1

    def normalize_run(self, run: ChangeRun) -> list[LineRecord]:
        """Build the line records for one run and advance the counters."""
        kind = LineKind.from_change(run.kind)
        has_left = run.kind is not ChangeKind.ADDED
        has_right = run.kind is not ChangeKind.REMOVED

        records: list[LineRecord] = []
        for text in split_run_lines(run.text):
            left = right = None
            if has_left:
                left = self.left_number
                self.left_number += 1
            if has_right:
                right = self.right_number
                self.right_number += 1
            records.append(LineRecord(kind=kind, text=text, left_number=left, right_number=right))
        return records

    def skip_run(self, run: ChangeRun) -> int:
        """Advance the counters past a run without building records.

        Returns:
            The number of lines skipped.
        """
        count = len(split_run_lines(run.text))
        if run.kind is not ChangeKind.ADDED:
            self.left_number += count
        if run.kind is not ChangeKind.REMOVED:
            self.right_number += count
        return count


def normalize_runs(runs: Iterable[ChangeRun]) -> Iterator[LineRecord]:
    """Yield the numbered line records of all runs in order."""
    normalizer = LineChangeNormalizer()
    for run in runs:
        yield from normalizer.normalize_run(run)
