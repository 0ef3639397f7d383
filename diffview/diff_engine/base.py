"""
Abstract base classes for the differ primitives.

The diff engine consumes a line-level differ and a word-level differ but does
not care how they are implemented. Both are assumed to be total functions over
arbitrary text pairs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from diffview.diff_engine.models import ChangeRun, InlineSpan


class LineDiffer(ABC):
    """Abstract base class for line-level differs.

    Implementations must return runs in document order. A run never mixes
    kinds and its text contains one or more complete lines.
    """

    @abstractmethod
    def diff(self, old: str, new: str) -> list[ChangeRun]:
        """Compute the change runs between two texts.

        Args:
            old: The original text.
            new: The modified text.

        Returns:
            Ordered list of added/removed/equal runs.
        """
        pass


class WordDiffer(ABC):
    """Abstract base class for word-level differs."""

    @abstractmethod
    def diff(self, a: str, b: str) -> list[InlineSpan]:
        """Compute word-level spans between two single lines.

        Args:
            a: The line on the earlier side.
            b: The line on the later side.

        Returns:
            Ordered list of added/removed/equal spans. Equal and removed spans
            concatenate to ``a``; equal and added spans concatenate to ``b``.
        """
        pass
