"""
Cyclic navigation across assembled blocks.

Only an index and the block count are stored; no references into the block
list survive a recomputation.
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"

    @classmethod
    def _missing_(cls, value: object) -> "Direction | None":
        if value == "prev":
            return cls.PREVIOUS
        return None


class NavigationController:
    """Tracks the current difference and wraps around at both ends.

    Attributes:
        current_index: Index of the current block, always 0 when there are none.
        block_count: Number of blocks being navigated.
    """

    def __init__(self, block_count: int = 0) -> None:
        self.current_index: int = 0
        self.block_count: int = max(block_count, 0)

    def set_block_count(self, block_count: int) -> int:
        """Update the block count and clamp the current index into range.

        Returns:
            The clamped current index.
        """
        self.block_count = max(block_count, 0)
        if self.block_count == 0:
            self.current_index = 0
        else:
            self.current_index = min(max(self.current_index, 0), self.block_count - 1)
        return self.current_index

    def next(self) -> int:
        if self.block_count:
            self.current_index = (self.current_index + 1) % self.block_count
        return self.current_index

    def previous(self) -> int:
        if self.block_count:
            self.current_index = (self.current_index - 1 + self.block_count) % self.block_count
        return self.current_index

    def navigate(self, direction: Direction | str) -> int:
        """Move one block in the given direction.

        Args:
            direction: "next" or "previous" (a Direction member also works).

        Returns:
            The new current index; 0 when there are no blocks.

        Raises:
            ValueError: If the direction is unknown.
        """
        direction = Direction(direction)
        if direction is Direction.NEXT:
            return self.next()
        return self.previous()
