"""
Data models for table normalization.

Contains the ``Cell`` working-grid record and the ``NormalizedTable``
result type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


# ── Cell ──────────────────────────────────────────────────────────────────


@dataclass
class Cell:
    """One occupied slot of the working grid.

    The principal slot of a merged cell carries its text; every other slot
    it covers holds a placeholder with empty ``content`` and the same spans.
    """

    content: str = ""
    colspan: int = 1
    rowspan: int = 1

    def placeholder(self) -> Cell:
        """Empty-content copy covering the same columns and rows."""
        return Cell(content="", colspan=self.colspan, rowspan=self.rowspan)

    def carried(self) -> Cell:
        """Placeholder for the next row while this cell's rowspan is active."""
        return Cell(content="", colspan=self.colspan, rowspan=self.rowspan - 1)


# A working-grid row: ``None`` marks an empty slot
GridRow = list[Optional[Cell]]


# ── NormalizedTable ───────────────────────────────────────────────────────


@dataclass
class NormalizedTable:
    """A rectangular, row-major grid of strings for one HTML ``<table>``.

    ``depth`` is 0 for a top-level table and grows by one per nesting level.
    The table behaves as a sequence of rows.
    """

    rows: list[list[str]] = field(default_factory=list)
    depth: int = 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def is_rectangular(self) -> bool:
        return all(len(row) == self.width for row in self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> list[str]:
        return self.rows[index]

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self.rows)

    def to_dict(self) -> dict:
        """Return a JSON-ready dictionary."""
        return {"depth": self.depth, "width": self.width, "rows": self.rows}
