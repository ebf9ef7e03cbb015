"""
CSV emitter: write each normalized table to ``table_{N}.csv``.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from config import OUTPUT_ENCODING, csv_filename
from errors import OutputError
from models import NormalizedTable

logger = logging.getLogger(__name__)


def emit(tables: Sequence[NormalizedTable], output_dir: str | Path) -> list[Path]:
    """Write one CSV file per table into *output_dir*.

    The directory (and its parents) is created when missing; existing
    ``table_{N}.csv`` files are overwritten.

    Returns the written paths in table order.

    Raises
    ------
    OutputError
        With ``stage`` naming the failing step (``"create directory"``,
        ``"create file"``, ``"write record"`` or ``"flush"``).
    """
    out = Path(output_dir)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError("create directory", out, exc.strerror or "") from exc

    written: list[Path] = []
    for i, table in enumerate(tables):
        path = out / csv_filename(i)
        logger.debug("Writing CSV file: %s", path)
        write_table(table, path)
        written.append(path)
    return written


def write_table(table: NormalizedTable, path: Path) -> None:
    """Write *table* to *path* as RFC 4180 CSV."""
    try:
        fh = path.open("w", encoding=OUTPUT_ENCODING, newline="")
    except OSError as exc:
        raise OutputError("create file", path, exc.strerror or "") from exc

    with fh:
        writer = csv.writer(fh)
        for row in table:
            try:
                writer.writerow(row)
            except (OSError, csv.Error) as exc:
                raise OutputError("write record", path, str(exc)) from exc
        try:
            fh.flush()
        except OSError as exc:
            raise OutputError("flush", path, exc.strerror or "") from exc
