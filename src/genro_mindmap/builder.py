# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HierarchyBuilder - turns flat table rows into a deduplicated tree.

Each row is read as a path of values, one per column in declared order,
hanging from a single synthetic root. A value is identified by its
``(column, value)`` pair: the first time a pair is seen a node is created
and attached under the current parent, every later occurrence reuses that
node without adding another edge, even when reached through a different
ancestor chain.

Example:
    >>> table = Table.from_rows([
    ...     {'Country': 'US', 'City': 'NYC'},
    ...     {'Country': 'US', 'City': 'LA'},
    ...     {'Country': 'FR', 'City': 'Paris'},
    ... ])
    >>> root = build(table)
    >>> [child.content for child in root.children]
    ['US', 'FR']
    >>> [child.content for child in root.children[0].children]
    ['NYC', 'LA']
"""

from __future__ import annotations

import logging

from .node import MindMapNode
from .table import Table

logger = logging.getLogger(__name__)

ROOT_LABEL = 'parent_node'


class HierarchyBuilder:
    """Builds mind map trees from tables.

    The builder holds configuration only; every call to build() works on
    its own visited mapping and its own tree, so one builder can serve
    concurrent callers.

    Attributes:
        root_label: Content of the synthetic root node.
    """

    __slots__ = ('root_label',)

    def __init__(self, root_label: str = ROOT_LABEL) -> None:
        """Initialize a HierarchyBuilder.

        Args:
            root_label: Content of the synthetic root node.
        """
        self.root_label = root_label

    def __repr__(self) -> str:
        return f"HierarchyBuilder(root_label={self.root_label!r})"

    def build(self, table: Table) -> MindMapNode:
        """Build the hierarchy for a table.

        Args:
            table: The source table. It is never modified.

        Returns:
            The synthetic root node. With zero rows it has no children.

        Raises:
            MalformedTableError: If the table is malformed. Raised before
                any node is created.
        """
        table.validate()

        root = MindMapNode(self.root_label)
        visited: dict[tuple[str, str], MindMapNode] = {}

        for row in table.rows:
            parent = root
            for column in table.columns:
                key = (column, row[column])
                node = visited.get(key)
                if node is None:
                    node = MindMapNode(key[1])
                    visited[key] = node
                    parent.add_child(node)
                parent = node

        logger.debug(
            "Built hierarchy: %d rows, %d columns, %d nodes",
            len(table.rows), len(table.columns), len(visited) + 1,
        )
        return root


def build(table: Table, root_label: str = ROOT_LABEL) -> MindMapNode:
    """Build the hierarchy for a table with a default HierarchyBuilder.

    Args:
        table: The source table.
        root_label: Content of the synthetic root node.

    Returns:
        The synthetic root node.
    """
    return HierarchyBuilder(root_label=root_label).build(table)
