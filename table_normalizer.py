"""
Table normalizer: HTML ``<table>`` elements → rectangular string grids.

Walks every table of a document (including tables nested inside cells) and
expands ``colspan``/``rowspan`` merges so each table becomes a rectangular,
row-major grid.  A merged cell keeps its text in its principal (top-left)
slot; every other slot it covers is an empty string.

Tables are returned in pre-order: a table comes before the tables nested
in it, and sibling tables keep document order.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import Tag

from config import DEFAULT_SPAN, MAX_COLSPAN, MAX_ROWSPAN
from models import Cell, GridRow, NormalizedTable
from parser_html import (
    cell_text,
    get_attr,
    nested_tables,
    parse_document,
    parse_fragment,
    row_cells,
    table_rows,
    to_html,
    top_level_tables,
)

logger = logging.getLogger(__name__)


def parse_span(value: Optional[str], limit: int) -> int:
    """Parse a ``colspan``/``rowspan`` attribute value.

    Missing, non-numeric, zero and negative values all mean 1; values above
    *limit* are clamped to it.

    >>> parse_span("3", 1000), parse_span("0", 1000), parse_span("x", 1000)
    (3, 1, 1)
    """
    if value is None:
        return DEFAULT_SPAN
    try:
        span = int(value)
    except ValueError:
        return DEFAULT_SPAN
    if span < 1:
        return DEFAULT_SPAN
    return min(span, limit)


# ── debug rendering ───────────────────────────────────────────────────────


def render_row(row: GridRow) -> str:
    """Render a working-grid row as ``['content', colspan, rowspan], …``."""
    return ", ".join(
        f"['{cell.content}', {cell.colspan}, {cell.rowspan}]" if cell is not None else ""
        for cell in row
    )


def render_table(table: NormalizedTable) -> str:
    """Render a normalized table as an aligned ``|``-separated text grid."""
    if not table.rows:
        return ""
    widths = [
        max(len(row[col]) for row in table.rows)
        for col in range(table.width)
    ]
    lines = []
    for row in table.rows:
        padded = [value.ljust(widths[col]) for col, value in enumerate(row)]
        lines.append(("| " + " | ".join(padded) + " |").rstrip())
    return "\n".join(lines)


# ── TableNormalizer ───────────────────────────────────────────────────────


class TableNormalizer:
    """Expands HTML tables into rectangular grids, one per ``<table>``."""

    def normalize_html(self, html_content: str) -> List[NormalizedTable]:
        """Normalize every table in an HTML document.

        Args:
            html_content: complete HTML document

        Returns:
            Normalized tables in pre-order (enclosing table first, then the
            tables nested in it).  Empty when the document has no table rows.
        """
        soup = parse_document(html_content)
        tables = self._normalize_all(soup, depth=0)

        if logger.isEnabledFor(logging.DEBUG):
            for i, table in enumerate(tables, start=1):
                logger.debug(
                    "Table %d: %d rows x %d columns, depth %d\n%s",
                    i, table.height, table.width, table.depth, render_table(table),
                )
        return tables

    def _normalize_all(self, root: Tag, depth: int) -> List[NormalizedTable]:
        """Normalize each top-level table under *root* together with its nested tables."""
        tables: List[NormalizedTable] = []
        for table in top_level_tables(root):
            tables.extend(self._normalize_table(table, depth))
        return tables

    def _normalize_table(self, table: Tag, depth: int) -> List[NormalizedTable]:
        """Run the single-table algorithm on *table*.

        Returns the table itself (unless it has no rows) followed by every
        table nested in its cells, in encounter order, then any nested table
        found outside the cells.
        """
        grid: List[GridRow] = []
        nested: List[NormalizedTable] = []
        handled: set[int] = set()
        max_columns = 0

        for tr in table_rows(table):
            current_row = self._carry_rowspans(grid[-1] if grid else [])
            col_index = 0

            for td in row_cells(tr):
                col_index = self._place_cell(td, current_row, col_index)

                for inner in nested_tables(td, table):
                    handled.add(id(inner))
                    nested.extend(self._normalize_nested(inner, depth + 1))

            max_columns = max(max_columns, col_index, len(current_row))
            current_row.extend([None] * (max_columns - len(current_row)))

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Columns: %d, Cells: %r", max_columns, render_row(current_row))
            grid.append(current_row)

        # Tables outside any cell (e.g. inside <caption>) still get emitted
        for inner in nested_tables(table, table):
            if id(inner) not in handled:
                nested.extend(self._normalize_nested(inner, depth + 1))

        if not grid:
            return nested

        return [self._rectangularize(grid, max_columns, depth)] + nested

    def _normalize_nested(self, inner: Tag, depth: int) -> List[NormalizedTable]:
        """Normalize a nested table on its own fresh grid."""
        fragment = parse_fragment(to_html(inner))
        return self._normalize_all(fragment, depth)

    @staticmethod
    def _carry_rowspans(previous: GridRow) -> GridRow:
        """Start a row with placeholders for rowspans still active in *previous*.

        Every column whose slot in the previous row has ``rowspan > 1`` is
        reserved at the same position; columns in between stay empty.
        """
        row: GridRow = []
        for col, cell in enumerate(previous):
            if cell is None or cell.rowspan <= 1:
                continue
            row.extend([None] * (col - len(row)))
            row.append(cell.carried())
        return row

    @staticmethod
    def _place_cell(td: Tag, row: GridRow, col_index: int) -> int:
        """Write the cell *td* into *row* starting at the first free column.

        The principal slot gets the cell text, the remaining ``colspan - 1``
        slots get placeholders.  Slots past the end are appended; existing
        slots are overwritten.

        Returns:
            The column index just past the cell.
        """
        while col_index < len(row) and row[col_index] is not None:
            col_index += 1

        colspan = parse_span(get_attr(td, "colspan"), MAX_COLSPAN)
        rowspan = parse_span(get_attr(td, "rowspan"), MAX_ROWSPAN)
        cell = Cell(content=cell_text(td).strip(), colspan=colspan, rowspan=rowspan)

        for k in range(colspan):
            slot = cell if k == 0 else cell.placeholder()
            if col_index >= len(row):
                row.append(slot)
            else:
                row[col_index] = slot
            col_index += 1

        return col_index

    @staticmethod
    def _rectangularize(grid: List[GridRow], width: int, depth: int) -> NormalizedTable:
        """Pad every row to *width* and map slots to strings."""
        rows = []
        for grid_row in grid:
            values = [cell.content if cell is not None else "" for cell in grid_row]
            values.extend([""] * (width - len(values)))
            rows.append(values)
        return NormalizedTable(rows=rows, depth=depth)


def normalize(html_content: str) -> List[NormalizedTable]:
    """Convenience function to normalize every table in an HTML document.

    Args:
        html_content: complete HTML document

    Returns:
        Normalized tables in pre-order
    """
    normalizer = TableNormalizer()
    return normalizer.normalize_html(html_content)
