#!/usr/bin/env python3
"""
CLI entry point: extract every HTML table of a page into CSV files.

Pipeline
--------
1. **Load** — read the HTML from a file or fetch it from an
   ``http(s)://`` URL (``source_loader.py``).
2. **Normalize** — expand colspan/rowspan merges and nested tables into
   rectangular grids (``table_normalizer.py``).
3. **Emit** — write ``table_1.csv``, ``table_2.csv``, … into the output
   directory (``csv_emitter.py``).

Usage
-----
    # Local file, CSVs in the current directory
    python convert.py --input page.html

    # URL, CSVs in out/ (created if missing), with grid trace
    python convert.py -i https://example.com/stats.html -o out --debug
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from csv_emitter import emit
from errors import ExtractionError, format_error_chain
from logging_utils import setup_logging
from source_loader import load
from table_normalizer import normalize

__version__ = "0.1.0"


def extract(source: str, output_dir: Path) -> int:
    """Run the pipeline for *source* and return the number of tables written."""
    html = load(source)

    tables = normalize(html)
    if not tables:
        print("No tables found in the input source.")
        return 0

    emit(tables, output_dir)
    print(f"Successfully extracted {len(tables)} tables!")
    return len(tables)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="html-tables-to-csv",
        description="Extract tables from HTML files and save them as CSV.",
    )
    ap.add_argument(
        "-i", "--input",
        type=str,
        required=True,
        help="Input HTML file path or URL.",
    )
    ap.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=Path("."),
        help="Output directory for CSV files (default: current directory).",
    )
    ap.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Print a trace of the grid construction.",
    )
    ap.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        extract(args.input, args.output_dir)
    except ExtractionError as exc:
        lines = format_error_chain(exc)
        print(f"Error: {lines[0]}", file=sys.stderr)
        for line in lines[1:]:
            print(f"  {line}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
