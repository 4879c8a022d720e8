# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-MindMap - Tabular data to mind map hierarchies.

A lightweight, zero-dependency library that turns the rows of a table
into a deduplicated tree ready for radial mind map rendering.
"""

__version__ = "0.1.0"

from .builder import ROOT_LABEL, HierarchyBuilder, build
from .exceptions import (
    MalformedTableError,
    MindMapError,
    RenderingError,
)
from .node import MindMapNode
from .parsers import parse_csv, parse_csv_file
from .render import JsonRenderer, OutlineRenderer, Renderer, create_mindmap
from .table import Table

__all__ = [
    # Core classes
    "Table",
    "MindMapNode",
    "HierarchyBuilder",
    "build",
    "ROOT_LABEL",
    # Parsers
    "parse_csv",
    "parse_csv_file",
    # Rendering
    "Renderer",
    "JsonRenderer",
    "OutlineRenderer",
    "create_mindmap",
    # Exceptions
    "MindMapError",
    "MalformedTableError",
    "RenderingError",
]
