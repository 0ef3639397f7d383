"""
Block assembler.

Groups numbered line records into display blocks. Runs are processed in
order, never individual lines, so run boundaries are preserved:

    - added/removed runs go into the open block and mark it as changed
    - an equal run closes a changed block; with context it is appended first,
      in "only differences" mode it is dropped
    - a block that never saw a change is never emitted

Leading context before the first change stays in the open block and ends up
at the top of the first emitted block.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from diffview.diff_engine.base import LineDiffer, WordDiffer
from diffview.diff_engine.differ import SequenceLineDiffer
from diffview.diff_engine.inline import InlineDiffPairer
from diffview.diff_engine.models import ChangeKind, ChangeRun, DiffBlock, LineRecord
from diffview.diff_engine.normalizer import LineChangeNormalizer


class BlockAssembler:
    """Builds diff blocks from change runs.

    Attributes:
        show_only_diffs: When True, unchanged context lines are dropped and
            blocks contain change lines only.
    """

    def __init__(self, show_only_diffs: bool = False, word_differ: WordDiffer | None = None) -> None:
        self.show_only_diffs = show_only_diffs
        self._pairer = InlineDiffPairer(word_differ)

    def assemble(self, runs: Iterable[ChangeRun]) -> list[DiffBlock]:
        """Assemble the runs of one comparison into blocks.

        Args:
            runs: Ordered change runs from a line differ.

        Returns:
            The blocks in document order. Empty when no run is a change.
        """
        normalizer = LineChangeNormalizer()
        blocks: list[DiffBlock] = []
        current: list[LineRecord] = []
        has_changes = False

        def close_block() -> None:
            nonlocal current, has_changes
            if current and has_changes:
                blocks.append(DiffBlock(lines=current))
            current = []
            has_changes = False

        for run in runs:
            if run.kind is ChangeKind.EQUAL:
                if self.show_only_diffs:
                    normalizer.skip_run(run)
                    if has_changes:
                        close_block()
                    continue
                current.extend(normalizer.normalize_run(run))
                if has_changes:
                    close_block()
                continue

            records = normalizer.normalize_run(run)
            self._pairer.pair(current[-1] if current else None, records)
            current.extend(records)
            has_changes = True

        if current and has_changes:
            blocks.append(DiffBlock(lines=current))

        return blocks


def normalize_whitespace(text: str) -> str:
    """Strip leading and trailing whitespace from every line of the text."""
    return "\n".join(line.strip() for line in text.split("\n"))


def compute_blocks(
    old_text: str,
    new_text: str,
    show_only_diffs: bool = False,
    ignore_whitespace: bool = False,
    line_differ: LineDiffer | None = None,
    word_differ: WordDiffer | None = None,
) -> list[DiffBlock]:
    """Compute the display blocks for two texts.

    This is a pure function of its arguments.

    Args:
        old_text: The original text.
        new_text: The modified text.
        show_only_diffs: Drop unchanged context from the blocks.
        ignore_whitespace: Strip every line before diffing.
        line_differ: Line differ to use instead of the difflib one.
        word_differ: Word differ to use instead of the difflib one.

    Returns:
        The blocks in document order; empty when the texts are line-identical.

    Examples:
        >>> blocks = compute_blocks("a\\nb\\nc", "a\\nx\\nc")
        >>> [line.text for line in blocks[0].lines]
        ['a', 'b', 'x', 'c']
    """
    if ignore_whitespace:
        old_text = normalize_whitespace(old_text)
        new_text = normalize_whitespace(new_text)

    differ = line_differ or SequenceLineDiffer()
    runs = differ.diff(old_text, new_text)
    blocks = BlockAssembler(show_only_diffs, word_differ).assemble(runs)
    logger.debug(
        "Assembled {blocks} blocks from {runs} runs (only_diffs={only}, ignore_ws={ws})",
        blocks=len(blocks),
        runs=len(runs),
        only=show_only_diffs,
        ws=ignore_whitespace,
    )
    return blocks
