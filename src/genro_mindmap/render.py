# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Rendering port and the renderers shipped with the package.

A renderer is any object with a ``render(root)`` method. The builder never
holds a reference to one: create_mindmap() builds the tree and hands it
over, after which the renderer owns it.
"""

from __future__ import annotations

import json
from typing import Any, Protocol, TextIO, runtime_checkable

from .builder import ROOT_LABEL, HierarchyBuilder
from .exceptions import RenderingError
from .node import MindMapNode
from .table import Table


@runtime_checkable
class Renderer(Protocol):
    """Anything able to lay out a finished mind map tree."""

    def render(self, root: MindMapNode) -> Any:
        ...


def create_mindmap(
    table: Table,
    renderer: Renderer,
    root_label: str = ROOT_LABEL,
) -> Any:
    """Build the hierarchy for a table and hand it to a renderer.

    Args:
        table: The source table.
        renderer: Receives the root node once the tree is complete.
        root_label: Content of the synthetic root node.

    Returns:
        Whatever the renderer returns.

    Raises:
        MalformedTableError: If the table is malformed. The renderer is
            not called.
    """
    root = HierarchyBuilder(root_label=root_label).build(table)
    return renderer.render(root)


class JsonRenderer:
    """Write the tree as JSON in the nodeView/children shape.

    Example:
        >>> JsonRenderer(sys.stdout).render(root)
    """

    def __init__(self, stream: TextIO, indent: int | None = 2) -> None:
        self.stream = stream
        self.indent = indent

    def render(self, root: MindMapNode) -> dict[str, Any]:
        payload = root.as_dict()
        try:
            json.dump(payload, self.stream, ensure_ascii=False, indent=self.indent)
            self.stream.write('\n')
        except OSError as e:
            raise RenderingError(f"Cannot write mind map: {e}") from e
        return payload


class OutlineRenderer:
    """Write the tree as an indented text outline, one node per line."""

    def __init__(self, stream: TextIO, indent: str = '  ') -> None:
        self.stream = stream
        self.indent = indent

    def render(self, root: MindMapNode) -> int:
        lines = 0
        try:
            for level, node in root.walk():
                self.stream.write(f"{self.indent * level}{node.content}\n")
                lines += 1
        except OSError as e:
            raise RenderingError(f"Cannot write mind map: {e}") from e
        return lines
