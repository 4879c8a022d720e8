# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Delimited text parser.

The first line is the header and gives the column names in order; every
following non-blank line is a row. Cell values are kept as text.
Quoting follows the standard ``csv`` excel dialect.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from ..exceptions import MalformedTableError
from ..table import Table

logger = logging.getLogger(__name__)


def parse_csv(text: str, delimiter: str = ',') -> Table:
    """Parse delimited text into a Table.

    Lines shorter than the header leave columns unset and fail later in
    Table.validate(). Cells beyond the header width are dropped with a
    warning.

    Args:
        text: The document content, header line first.
        delimiter: Single-character field separator.

    Returns:
        Table with the header as columns and one row per data line.

    Raises:
        MalformedTableError: If the document has no header line or the
            text cannot be read as delimited rows.
    """
    try:
        reader = csv.reader(io.StringIO(text), delimiter=delimiter)
        lines = [line for line in reader if line]
    except csv.Error as e:
        raise MalformedTableError(f"Cannot parse delimited text: {e}") from e
    if not lines:
        raise MalformedTableError("Document has no header line")

    columns = tuple(lines[0])
    rows = []
    for index, line in enumerate(lines[1:]):
        if len(line) > len(columns):
            logger.warning(
                "Row %d has %d cells, only the first %d are used",
                index, len(line), len(columns),
            )
        rows.append(dict(zip(columns, line)))

    logger.debug("Parsed %d rows over columns %s", len(rows), columns)
    return Table(columns=columns, rows=tuple(rows))


def parse_csv_file(
    path: str | Path,
    delimiter: str = ',',
    encoding: str = 'utf-8-sig',
) -> Table:
    """Parse a delimited text file into a Table.

    Args:
        path: Path to the file.
        delimiter: Single-character field separator.
        encoding: File encoding. The default drops a leading BOM.

    Returns:
        Table parsed from the file content.

    Raises:
        MalformedTableError: If the file is not valid text in the given
            encoding, or its content is malformed.
    """
    try:
        with open(path, encoding=encoding, newline='') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise MalformedTableError(f"{path} is not {encoding} text: {e}") from e
    return parse_csv(content, delimiter=delimiter)
