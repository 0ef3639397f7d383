"""
Inline word-level pairing of changed lines.

This is a local, greedy heuristic. The lines of a change run are paired with
the record that precedes the run in the open block, and only when that record
has the opposite change kind. All lines of the run see the same predecessor,
because the run is attached to the block only after every line is built. There
is no optimal alignment across a multi-line replacement.
"""

from __future__ import annotations

from diffview.diff_engine.base import WordDiffer
from diffview.diff_engine.differ import SequenceWordDiffer
from diffview.diff_engine.models import LineRecord


class InlineDiffPairer:
    """Attaches word-level sub-diffs to lines paired across a change seam."""

    def __init__(self, word_differ: WordDiffer | None = None) -> None:
        self._word_differ = word_differ or SequenceWordDiffer()

    def pair(self, predecessor: LineRecord | None, records: list[LineRecord]) -> int:
        """Attach inline diffs to the records of a change run.

        Args:
            predecessor: Last record already in the open block, if any.
            records: Records of the run about to be appended. Modified in place.

        Returns:
            The number of records that received an inline diff.
        """
        if predecessor is None:
            return 0

        paired = 0
        for record in records:
            if not record.kind.is_change or predecessor.kind is not record.kind.opposite():
                continue
            record.inline_diff = self._word_differ.diff(predecessor.text, record.text)
            paired += 1
        return paired
