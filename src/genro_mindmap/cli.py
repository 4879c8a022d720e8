# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line entry point: convert CSV files into mind maps.

Usage:
    genro-mindmap cities.csv
    genro-mindmap --format outline a.csv b.csv
    genro-mindmap -o map.json --root-label World cities.csv

Each file is converted independently. A file that fails is logged and
skipped; the exit status is 1 if any file failed.
With several files the json format writes one compact document per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from .builder import ROOT_LABEL
from .exceptions import MindMapError
from .parsers import parse_csv_file
from .render import JsonRenderer, OutlineRenderer, Renderer, create_mindmap

logger = logging.getLogger(__name__)

RENDERERS = {
    'json': JsonRenderer,
    'outline': OutlineRenderer,
}


def delimiter_arg(value: str) -> str:
    """Accept a single-character field separator."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(
            f"delimiter must be a single character, got {value!r}"
        )
    return value


def make_renderer(fmt: str, stream: TextIO, many: bool = False) -> Renderer:
    """Create the renderer for an output format.

    With several inputs JSON is written compact, one document per line.
    """
    if fmt == 'json' and many:
        return JsonRenderer(stream, indent=None)
    return RENDERERS[fmt](stream)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='genro-mindmap',
        description='Convert CSV files into mind map trees.',
    )
    parser.add_argument('files', nargs='+', help='CSV files to convert')
    parser.add_argument(
        '--format', choices=sorted(RENDERERS), default='json',
        help='output format (default: json; JSON Lines when several files are given)',
    )
    parser.add_argument(
        '--delimiter', type=delimiter_arg, default=',',
        help='single-character field separator (default: ",")',
    )
    parser.add_argument(
        '--root-label', default=ROOT_LABEL,
        help=f'content of the root node (default: {ROOT_LABEL})',
    )
    parser.add_argument(
        '-o', '--output', default=None,
        help='output file (default: stdout)',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='enable debug logging',
    )
    return parser


def convert_files(
    files: Sequence[str],
    renderer: Renderer,
    delimiter: str = ',',
    root_label: str = ROOT_LABEL,
) -> list[str]:
    """Convert each file and render it, collecting the ones that fail.

    Args:
        files: Paths of the CSV files.
        renderer: Renderer receiving each built tree.
        delimiter: Field separator.
        root_label: Content of the root node.

    Returns:
        Paths of the files that could not be converted.
    """
    failed: list[str] = []
    for path in files:
        try:
            table = parse_csv_file(path, delimiter=delimiter)
            create_mindmap(table, renderer, root_label=root_label)
        except (MindMapError, OSError) as e:
            logger.error("Cannot create mind map from %s: %s", path, e)
            failed.append(path)
        else:
            logger.info("Created mind map from %s (%d rows)", path, len(table))
    return failed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    many = len(args.files) > 1
    stream: TextIO
    if args.output is None:
        stream = sys.stdout
        failed = convert_files(
            args.files, make_renderer(args.format, stream, many),
            delimiter=args.delimiter, root_label=args.root_label,
        )
    else:
        with open(args.output, 'w', encoding='utf-8') as stream:
            failed = convert_files(
                args.files, make_renderer(args.format, stream, many),
                delimiter=args.delimiter, root_label=args.root_label,
            )

    if failed:
        logger.error("%d of %d files failed", len(failed), len(args.files))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
