"""
JSON Tree Panel widget for displaying a rendered JSON block.

This module provides a Tree widget that shows a JsonRenderNode tree. Each
tree node stores the JSON path of its render node as data, so expand and
collapse events can be mirrored into the session's expansion set.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Tree
from textual.widgets.tree import TreeNode

from diffview.diff_engine.json_tree import MAX_TREE_DEPTH, JsonRenderNode
from diffview.formatting import LINE_STYLES, json_label


class JsonTreePanel(Tree[str]):
    """
    JSON tree widget for one diff block.

    Composite values are expandable nodes labelled ``key: {`` or ``key: [``
    with the closing token as their last child. Scalars are leaves labelled
    ``key: literal``. A node starts expanded only if its path is in the
    expansion set the render tree was built from.
    """

    DEFAULT_CSS = """
    JsonTreePanel {
        height: auto;
        max-height: 30;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        root: JsonRenderNode,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """
        Initialize the JSON tree panel.

        Args:
            root: The rendered JSON tree to display.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(json_label(root), data=root.path, id=id, classes=classes)
        self._render_root = root
        self.show_root = True

    def on_mount(self) -> None:
        """Populate the tree once mounted."""
        self.load_render_tree(self._render_root)

    def load_render_tree(self, root: JsonRenderNode) -> None:
        """
        Load a rendered JSON tree.

        Clears the existing tree and rebuilds it from the render nodes.

        Args:
            root: The rendered JSON tree.
        """
        self.clear()
        self._render_root = root
        self.root.set_label(json_label(root))
        self.root.data = root.path
        self.root.allow_expand = root.is_composite
        self._add_children(self.root, root, depth=0)
        if root.expanded:
            self.root.expand()
        else:
            self.root.collapse()

    def _add_children(self, node: TreeNode[str], render_node: JsonRenderNode, depth: int = 0) -> None:
        """Recursively add the children of a composite render node.

        Args:
            node: The tree node to add children to.
            render_node: The render node whose children are added.
            depth: Current recursion depth (used to prevent stack overflow).
        """
        if not render_node.is_composite or depth >= MAX_TREE_DEPTH:
            return

        for child in render_node.children:
            if child.is_composite:
                child_node = node.add(
                    json_label(child),
                    data=child.path,
                    expand=child.expanded,
                    allow_expand=True,
                )
                self._add_children(child_node, child, depth + 1)
            else:
                node.add_leaf(json_label(child), data=child.path)

        node.add_leaf(Text(render_node.closing or "", style=LINE_STYLES[render_node.kind]))

    def set_path_expanded(self, path: str, expanded: bool) -> int:
        """Expand or collapse every node stored under the given JSON path.

        Nodes already in the requested state are left alone, so no further
        expand/collapse messages are posted for them.

        Returns:
            The number of nodes changed.
        """
        changed = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.data == path and node.allow_expand and node.is_expanded != expanded:
                if expanded:
                    node.expand()
                else:
                    node.collapse()
                changed += 1
            stack.extend(node.children)
        return changed

    @property
    def render_root(self) -> JsonRenderNode:
        return self._render_root
