# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers producing a Table from delimited text.

Available parsers:
- delimited: CSV and other single-character delimited text

Example:
    >>> from genro_mindmap.parsers import parse_csv_file
    >>> table = parse_csv_file('cities.csv')
    >>> table.columns
    ('Country', 'City')
"""

from .delimited import parse_csv, parse_csv_file

__all__ = [
    'parse_csv',
    'parse_csv_file',
]
