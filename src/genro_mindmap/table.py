# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Table - the tabular input of the hierarchy builder.

A Table is an ordered sequence of column names plus an ordered sequence
of rows, each row mapping every column name to a text value.

Example:
    >>> table = Table(
    ...     columns=('Country', 'City'),
    ...     rows=({'Country': 'US', 'City': 'NYC'},),
    ... )
    >>> table.validate()
    >>> len(table)
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping

from .exceptions import MalformedTableError


@dataclass(frozen=True, eq=False)
class Table:
    """Ordered columns and ordered rows of text cells.

    Tables compare and hash by identity, since rows are plain mappings.

    Attributes:
        columns: Column names in declared order. Column order decides
            the depth at which each value lands in the tree.
        rows: Rows in table order, each a mapping from column name to value.
    """

    columns: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable, store tuples
        object.__setattr__(self, 'columns', tuple(self.columns))
        object.__setattr__(self, 'rows', tuple(self.rows))

    def __len__(self) -> int:
        """Return the number of rows."""
        return len(self.rows)

    def __iter__(self) -> Iterator[Mapping[str, str]]:
        """Iterate over rows in table order."""
        return iter(self.rows)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping[str, Any]],
        columns: Iterable[str] | None = None,
    ) -> Table:
        """Create a Table from a sequence of row mappings.

        Args:
            rows: Row mappings in table order.
            columns: Column names in declared order. If None, the keys of
                the first row are used.

        Returns:
            A new Table. It is not validated here; the builder does that.

        Raises:
            MalformedTableError: If columns is None and there are no rows
                to take them from.
        """
        rows = tuple(rows)
        if columns is None:
            if not rows:
                raise MalformedTableError(
                    "Cannot infer columns from a table with no rows"
                )
            columns = tuple(rows[0].keys())
        return cls(columns=tuple(columns), rows=rows)

    def validate(self) -> None:
        """Check that the table can be converted into a hierarchy.

        Raises:
            MalformedTableError: If there are no columns, if a column name
                is repeated, or if a row lacks a value for a column.
        """
        if not self.columns:
            raise MalformedTableError("Table has no columns")

        seen: set[str] = set()
        for column in self.columns:
            if column in seen:
                raise MalformedTableError(f"Duplicated column name '{column}'")
            seen.add(column)

        for index, row in enumerate(self.rows):
            for column in self.columns:
                if column not in row or row[column] is None:
                    raise MalformedTableError(
                        f"Row {index} has no value for column '{column}'"
                    )
