# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MindMap exceptions."""

from __future__ import annotations


class MindMapError(Exception):
    """Base exception for MindMap errors."""

    pass


class MalformedTableError(MindMapError):
    """Raised when a table cannot be turned into a hierarchy.

    Covers an empty column list, duplicated column names and rows
    missing a value for a declared column.
    """

    pass


class RenderingError(MindMapError):
    """Raised when a renderer cannot deliver a built tree."""

    pass
