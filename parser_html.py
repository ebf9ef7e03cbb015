"""
Document parser adapter over BeautifulSoup.

The table normalizer only needs a handful of tree operations: selecting
tables, rows and cells in document order, reading attributes, collecting
cell text and serializing an element back to HTML.  They are gathered here
so the normalizer never touches the ``bs4`` API directly.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString

from config import CELL_TAGS, HTML_PARSER, ROW_TAG, TABLE_TAG

# Only plain text nodes contribute to cell text (no comments, scripts, …)
_TEXT_TYPES = (NavigableString, CData)


# ── parsing ───────────────────────────────────────────────────────────────


def parse_document(html: str) -> BeautifulSoup:
    """Parse a complete HTML document."""
    return BeautifulSoup(html, HTML_PARSER)


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse an HTML fragment (e.g. a serialized ``<table>``)."""
    return BeautifulSoup(html, HTML_PARSER)


def to_html(el: Tag) -> str:
    """Serialize *el* back to an HTML string."""
    return str(el)


# ── selection ─────────────────────────────────────────────────────────────


def _owner_table(el: Tag) -> Tag | None:
    """Nearest ``<table>`` ancestor of *el*."""
    return el.find_parent(TABLE_TAG)


def top_level_tables(root: Tag) -> list[Tag]:
    """Tables under *root* that are not nested in another table."""
    return [t for t in root.find_all(TABLE_TAG) if _owner_table(t) is None]


def table_rows(table: Tag) -> list[Tag]:
    """``<tr>`` elements of *table*, skipping rows of nested tables.

    Rows inside ``<thead>``/``<tbody>``/``<tfoot>`` are included in
    document order like any other row.
    """
    return [tr for tr in table.find_all(ROW_TAG) if _owner_table(tr) is table]


def row_cells(row: Tag) -> list[Tag]:
    """Direct ``<td>``/``<th>`` children of *row*."""
    return row.find_all(CELL_TAGS, recursive=False)


def nested_tables(cell: Tag, owner: Tag) -> list[Tag]:
    """Tables directly nested in *cell* (one level below *owner*)."""
    return [t for t in cell.find_all(TABLE_TAG) if _owner_table(t) is owner]


# ── element access ────────────────────────────────────────────────────────


def get_attr(el: Tag, name: str) -> str | None:
    """Return attribute *name* of *el* as a string, or ``None``."""
    value = el.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        # multi-valued attributes (class, rel, …) come back as lists
        return " ".join(value)
    return str(value)


def cell_text(cell: Tag) -> str:
    """Concatenate the text nodes of *cell* in document order.

    Text belonging to a table nested inside the cell is left out; nested
    tables are emitted as tables of their own.  Whitespace is untouched.
    """
    owner = _owner_table(cell)
    parts: list[str] = []
    for node in cell.descendants:
        if type(node) not in _TEXT_TYPES:
            continue
        if _owner_table(node) is not owner:
            continue
        parts.append(str(node))
    return "".join(parts)
