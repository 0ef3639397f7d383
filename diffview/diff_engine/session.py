"""
Comparison session: the owner of the mutable viewer state.

All blocks are a pure function of (old text, new text, show_only_diffs,
ignore_whitespace) and are recomputed whenever one of them changes. The
expansion set and the navigation index are the only state that survives
re-renders of the same comparison, and they change only through explicit
actions (toggle a node, navigate, set an option).
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any

from loguru import logger

from diffview.diff_engine.assembler import compute_blocks
from diffview.diff_engine.base import LineDiffer, WordDiffer
from diffview.diff_engine.json_tree import ExpansionSet, JsonTreeRenderer
from diffview.diff_engine.models import DiffBlock, DiffOptions, JsonParseScope, ViewMode
from diffview.diff_engine.navigation import Direction, NavigationController
from diffview.diff_engine.render import BlockView, JsonView, render

IDENTICAL_MESSAGE = "The files are identical"
NO_DIFFERENCES_MESSAGE = "No differences found"

# Options whose change requires the blocks to be recomputed
_BLOCK_OPTIONS = frozenset(["show_only_diffs", "ignore_whitespace"])


class ComparisonSession:
    """State of one comparison between two texts.

    Attributes:
        options: Current diff options.
        expansion: Expanded JSON node paths.
        navigation: Cyclic index into the blocks.
    """

    def __init__(
        self,
        old_text: str,
        new_text: str,
        options: DiffOptions | None = None,
        line_differ: LineDiffer | None = None,
        word_differ: WordDiffer | None = None,
    ) -> None:
        self._old_text = old_text
        self._new_text = new_text
        self.options = options or DiffOptions()
        self._line_differ = line_differ
        self._word_differ = word_differ
        self.expansion = ExpansionSet()
        self.navigation = NavigationController()
        self._blocks: list[DiffBlock] | None = None

    @property
    def old_text(self) -> str:
        return self._old_text

    @property
    def new_text(self) -> str:
        return self._new_text

    @property
    def blocks(self) -> list[DiffBlock]:
        """The assembled blocks, recomputed lazily after any change."""
        return self._ensure_blocks()

    def _ensure_blocks(self) -> list[DiffBlock]:
        if self._blocks is None:
            self._blocks = compute_blocks(
                self._old_text,
                self._new_text,
                show_only_diffs=self.options.show_only_diffs,
                ignore_whitespace=self.options.ignore_whitespace,
                line_differ=self._line_differ,
                word_differ=self._word_differ,
            )
            self.navigation.set_block_count(len(self._blocks))
        return self._blocks

    @property
    def is_identical(self) -> bool:
        """True when the inputs are line-identical under the active settings."""
        return not self.blocks

    @property
    def current_index(self) -> int:
        self._ensure_blocks()
        return self.navigation.current_index

    @property
    def current_block(self) -> DiffBlock | None:
        blocks = self.blocks
        if not blocks:
            return None
        return blocks[self.navigation.current_index]

    @property
    def status_text(self) -> str:
        """Position summary, e.g. "2 of 5 differences"."""
        blocks = self.blocks
        if not blocks:
            return NO_DIFFERENCES_MESSAGE
        return f"{self.navigation.current_index + 1} of {len(blocks)} differences"

    def set_texts(self, old_text: str, new_text: str) -> None:
        """Replace both texts and invalidate the blocks."""
        self._old_text = old_text
        self._new_text = new_text
        self._invalidate()

    def set_option(self, name: str, value: Any) -> None:
        """Change a single option.

        Raises:
            ValueError: If the option name or value is unknown.
        """
        if name not in {f.name for f in fields(DiffOptions)}:
            raise ValueError(f"Unknown option: {name}")
        if name == "view_mode":
            value = ViewMode(value)
        elif name == "json_parse_scope":
            value = JsonParseScope(value)
        elif not isinstance(value, bool):
            raise ValueError(f"Option {name} expects a bool, got {value!r}")

        if getattr(self.options, name) == value:
            return
        self.options = replace(self.options, **{name: value})
        logger.debug("Option {name} set to {value}", name=name, value=value)
        if name in _BLOCK_OPTIONS:
            self._invalidate()

    def toggle_option(self, name: str) -> bool:
        """Flip a boolean option and return its new value."""
        value = not getattr(self.options, name)
        self.set_option(name, value)
        return value

    def toggle_view_mode(self) -> ViewMode:
        mode = ViewMode.UNIFIED if self.options.view_mode is ViewMode.SPLIT else ViewMode.SPLIT
        self.set_option("view_mode", mode)
        return mode

    def _invalidate(self) -> None:
        self._blocks = None
        # Recompute right away so the navigation index is clamped to the new count
        self._ensure_blocks()

    def render(self, block: DiffBlock) -> BlockView:
        """Render one block with the session's options and expansion state."""
        return render(
            block,
            is_json=self.options.is_json,
            view_mode=self.options.view_mode,
            renderer=JsonTreeRenderer(self.expansion),
            json_parse_scope=self.options.json_parse_scope,
        )

    def render_all(self) -> list[BlockView]:
        return [self.render(block) for block in self.blocks]

    def toggle_expansion(self, path: str) -> bool:
        """Toggle a JSON node path.

        Returns:
            True if the path is now expanded.
        """
        return self.expansion.toggle(path)

    def set_expanded(self, path: str, expanded: bool) -> None:
        if expanded:
            self.expansion.expand(path)
        else:
            self.expansion.collapse(path)

    def expand_all(self) -> int:
        """Expand every composite node of every JSON block.

        Returns:
            The number of expanded paths.
        """
        for view in self.render_all():
            if isinstance(view, JsonView):
                self.expansion.expand_all(view.root.iter_paths())
        return len(self.expansion)

    def collapse_all(self) -> None:
        self.expansion.clear()

    def navigate(self, direction: Direction | str) -> int:
        """Move to the next or previous difference, wrapping at both ends.

        Returns:
            The new current index; always 0 when there are no differences.
        """
        self._ensure_blocks()
        return self.navigation.navigate(direction)
