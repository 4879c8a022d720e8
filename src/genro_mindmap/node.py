# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MindMap node class."""

from __future__ import annotations

from typing import Any, Iterator


class MindMapNode:
    """A node in a mind map hierarchy.

    Each node has:
    - content: The display label (a cell value, or the root sentinel)
    - children: Ordered list of child nodes, each owned by this node only

    Example:
        >>> root = MindMapNode('parent_node')
        >>> us = root.add_child(MindMapNode('US'))
        >>> us.add_child(MindMapNode('NYC'))
        MindMapNode('NYC', children=0)
        >>> root.count()
        3
    """

    __slots__ = ('content', 'children')

    def __init__(
        self,
        content: str,
        children: list[MindMapNode] | None = None,
    ) -> None:
        """Initialize a MindMapNode.

        Args:
            content: The node's display label.
            children: Optional initial list of child nodes.
        """
        self.content = content
        self.children = children if children is not None else []

    def __repr__(self) -> str:
        return f"MindMapNode({self.content!r}, children={len(self.children)})"

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    @property
    def depth(self) -> int:
        """Height of the subtree rooted here (a leaf has depth 1)."""
        if not self.children:
            return 1
        return 1 + max(child.depth for child in self.children)

    def add_child(self, node: MindMapNode) -> MindMapNode:
        """Append a child node and return it."""
        self.children.append(node)
        return node

    def count(self) -> int:
        """Return the number of nodes in this subtree, self included."""
        return 1 + sum(child.count() for child in self.children)

    def walk(self, _level: int = 0) -> Iterator[tuple[int, MindMapNode]]:
        """Yield (level, node) pairs in pre-order, starting at level 0.

        Example:
            >>> for level, node in root.walk():
            ...     print('  ' * level + node.content)
        """
        yield _level, self
        for child in self.children:
            yield from child.walk(_level + 1)

    def as_dict(self) -> dict[str, Any]:
        """Convert to the nested dict consumed by mind map renderers.

        Returns:
            ``{'nodeView': {'content': ...}, 'children': [...]}``, recursively.
        """
        return {
            'nodeView': {'content': self.content},
            'children': [child.as_dict() for child in self.children],
        }
