"""
JSON tree rendering for diff blocks.

The JSON view is a visualization over the line diff, not a semantic object
diff: every node of a rendered tree carries the change kind of the block's
first line. Expand/collapse state lives in an ExpansionSet keyed by node
path, so reparsing the same JSON on every render keeps the state as long as
the paths are stable.

Paths:
    - root: ""
    - object member: ``parent.key`` (``key`` at the root)
    - keys containing ``.``, ``[``, ``]`` or ``"`` and empty keys: ``parent["key"]``
    - array item: ``parent[index]``

Root members carry no leading separator (``a`` rather than ``.a``) and array
items are bracketed (``[0]`` rather than ``.0``), so a path never collides
with a member name that itself contains dots or digits.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Union

from loguru import logger

from diffview.diff_engine.errors import InvalidJson
from diffview.diff_engine.models import DiffBlock, JsonParseScope, LineKind


# Maximum depth for recursive tree operations to prevent stack overflow
MAX_TREE_DEPTH = 100

_PATH_SPECIAL_CHARS = frozenset('.[]"')


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    value: int | float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple["JsonValue", ...] = ()


@dataclass(frozen=True)
class JsonObject:
    """A JSON object with its members in source order (duplicates kept)."""

    entries: tuple[tuple[str, "JsonValue"], ...] = ()


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]


class _ObjectPairs(list):
    """Marks decoded objects so they are not confused with arrays."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(text: str) -> int | float:
    """Decode a JSON number with a fraction or exponent.

    Integral values become ints, so ``1.0`` and ``1`` decode the same.
    """
    number = float(text)
    if math.isfinite(number) and number.is_integer() and abs(number) < 1e21:
        return int(number)
    return number


def decode_json(text: str, **kwargs: Any) -> Any:
    """Decode JSON text into Python values, rejecting NaN and Infinity.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float, **kwargs)


def parse_json(text: str) -> JsonValue:
    """Parse a complete JSON document into a tagged JSON value.

    Args:
        text: The JSON text.

    Returns:
        The parsed value.

    Raises:
        InvalidJson: If the text is not one complete JSON value.
    """
    try:
        raw = decode_json(text, object_pairs_hook=_ObjectPairs)
    except (ValueError, RecursionError) as e:
        raise InvalidJson(f"Cannot parse JSON: {e}") from e
    return _to_value(raw)


def _scalar_value(raw: Any) -> JsonValue:
    if raw is None:
        return JsonNull()
    if isinstance(raw, bool):
        return JsonBool(raw)
    if isinstance(raw, (int, float)):
        return JsonNumber(raw)
    return JsonString(raw)


def _to_value(raw: Any) -> JsonValue:
    """Convert decoded JSON into the tagged variant.

    Walks the document with an explicit stack, so any nesting json.loads
    accepts converts without hitting the interpreter's recursion limit.
    """
    results: list[JsonValue] = []
    stack: list[tuple[Any, bool]] = [(raw, False)]
    while stack:
        node, children_done = stack.pop()
        if not isinstance(node, list):
            results.append(_scalar_value(node))
            continue
        if not children_done:
            stack.append((node, True))
            members = [value for _, value in node] if isinstance(node, _ObjectPairs) else node
            stack.extend((member, False) for member in reversed(members))
            continue

        start = len(results) - len(node)
        values = results[start:]
        del results[start:]
        if isinstance(node, _ObjectPairs):
            results.append(JsonObject(tuple((key, value) for (key, _), value in zip(node, values))))
        else:
            results.append(JsonArray(tuple(values)))
    return results[0]


def format_literal(value: JsonValue) -> str:
    """Format a scalar the way JSON.stringify does.

    Examples:
        >>> format_literal(JsonNumber(1.0))
        '1'
        >>> format_literal(JsonString("é"))
        '"é"'
    """
    if isinstance(value, JsonNull):
        return "null"
    if isinstance(value, JsonBool):
        return "true" if value.value else "false"
    if isinstance(value, JsonNumber):
        number = value.value
        if isinstance(number, float) and math.isfinite(number) and number.is_integer() and abs(number) < 1e21:
            return str(int(number))
        return json.dumps(number)
    if isinstance(value, JsonString):
        return json.dumps(value.value, ensure_ascii=False)
    raise TypeError(f"Not a scalar JSON value: {value!r}")


def member_path(parent: str, key: str) -> str:
    """Build the path of an object member."""
    if not key or _PATH_SPECIAL_CHARS.intersection(key):
        return f"{parent}[{json.dumps(key, ensure_ascii=False)}]"
    return f"{parent}.{key}" if parent else key


def item_path(parent: str, index: int) -> str:
    """Build the path of an array item."""
    return f"{parent}[{index}]"


class ExpansionSet:
    """Set of node paths currently shown expanded.

    Owned by a comparison session and keyed by path identity. Starts empty,
    so every composite node begins collapsed.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def is_expanded(self, path: str) -> bool:
        return path in self._paths

    def toggle(self, path: str) -> bool:
        """Flip the state of a path.

        Returns:
            True if the path is now expanded.
        """
        if path in self._paths:
            self._paths.discard(path)
            return False
        self._paths.add(path)
        return True

    def expand(self, path: str) -> None:
        self._paths.add(path)

    def collapse(self, path: str) -> None:
        self._paths.discard(path)

    def expand_all(self, paths: Iterable[str]) -> None:
        self._paths.update(paths)

    def clear(self) -> None:
        self._paths.clear()


@dataclass
class JsonRenderNode:
    """One node of a rendered JSON tree.

    Composite nodes carry ``opening``/``closing`` tokens and children; their
    children are always built, and consumers hide them while ``expanded`` is
    False. Scalar nodes carry ``literal``.

    Attributes:
        path: Unique path of the node, the key into the ExpansionSet.
        key: Member name or array index shown before the value, None at the root.
        kind: Change kind inherited from the block.
        literal: JSON literal text of a scalar.
        opening: "{" or "[" for composites.
        closing: "}" or "]" for composites.
        expanded: Whether the node's path is in the ExpansionSet.
        children: Child nodes in source order.
    """

    path: str
    key: str | None
    kind: LineKind
    literal: str | None = None
    opening: str | None = None
    closing: str | None = None
    expanded: bool = False
    children: list["JsonRenderNode"] = field(default_factory=list)

    @property
    def is_composite(self) -> bool:
        return self.opening is not None

    def iter_paths(self) -> Iterator[str]:
        """Yield the paths of this node and all composite descendants."""
        if not self.is_composite:
            return
        yield self.path
        for child in self.children:
            yield from child.iter_paths()


def block_json_text(block: DiffBlock, scope: JsonParseScope = JsonParseScope.FIRST_LINE) -> str:
    """Return the text of a block that the JSON renderer tries to parse.

    FIRST_LINE uses only the block's first line. BLOCK rebuilds the modified
    side (unchanged and added lines), or the original side when the block has
    no line on the modified side.
    """
    if scope is JsonParseScope.FIRST_LINE:
        return block.lines[0].text
    right = [line.text for line in block.lines if line.right_number is not None]
    if right:
        return "\n".join(right)
    return "\n".join(line.text for line in block.lines if line.left_number is not None)


class JsonTreeRenderer:
    """Renders parsed JSON as a path-addressed tree with expansion state."""

    def __init__(self, expansion: ExpansionSet | None = None) -> None:
        self.expansion = expansion if expansion is not None else ExpansionSet()

    def render_block(
        self,
        block: DiffBlock,
        scope: JsonParseScope = JsonParseScope.FIRST_LINE,
    ) -> JsonRenderNode:
        """Parse a block and render it as a JSON tree.

        Raises:
            InvalidJson: If the block text does not parse; callers fall back
                to the flat view.
        """
        value = parse_json(block_json_text(block, scope))
        logger.debug("Rendering block {start} as JSON tree", start=block.start_line)
        return self.render_value(value, path="", kind=block.kind)

    def render_value(
        self,
        value: JsonValue,
        path: str = "",
        kind: LineKind = LineKind.UNCHANGED,
        key: str | None = None,
        depth: int = 0,
    ) -> JsonRenderNode:
        """Render a JSON value and its descendants."""
        if depth >= MAX_TREE_DEPTH:
            return JsonRenderNode(
                path=path,
                key=key,
                kind=kind,
                literal=f"... (depth limit {MAX_TREE_DEPTH} reached)",
            )

        if isinstance(value, JsonObject):
            node = JsonRenderNode(path, key, kind, opening="{", closing="}")
            for member_key, member in value.entries:
                node.children.append(
                    self.render_value(member, member_path(path, member_key), kind, member_key, depth + 1)
                )
        elif isinstance(value, JsonArray):
            node = JsonRenderNode(path, key, kind, opening="[", closing="]")
            for index, item in enumerate(value.items):
                node.children.append(
                    self.render_value(item, item_path(path, index), kind, str(index), depth + 1)
                )
        else:
            return JsonRenderNode(path, key, kind, literal=format_literal(value))

        node.expanded = self.expansion.is_expanded(path)
        return node
