"""
Configuration for the HTML table → CSV extractor.

Contains HTML selector names, span defaults and limits, source URL schemes,
output file naming and logging format constants.
"""

# ---------------------------------------------------------------------------
# HTML parsing
# ---------------------------------------------------------------------------

# BeautifulSoup tree builder ("lxml" or "html.parser")
HTML_PARSER = "lxml"

TABLE_TAG = "table"
ROW_TAG = "tr"
CELL_TAGS: list[str] = ["td", "th"]

# ---------------------------------------------------------------------------
# Cell spans
# ---------------------------------------------------------------------------

DEFAULT_SPAN = 1

# Upper bounds from the HTML standard (colspan ≤ 1000, rowspan ≤ 65534)
MAX_COLSPAN = 1000
MAX_ROWSPAN = 65534

# ---------------------------------------------------------------------------
# Source loading
# ---------------------------------------------------------------------------

URL_SCHEMES: tuple[str, ...] = ("http://", "https://")

FETCH_TIMEOUT = 30  # seconds
DEFAULT_ENCODING = "utf-8"

# Characters of fetched HTML echoed in debug mode
DEBUG_PREVIEW_CHARS = 200

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

CSV_FILENAME_TEMPLATE = "table_{index}.csv"
OUTPUT_ENCODING = "utf-8"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def csv_filename(index: int) -> str:
    """Return the CSV file name for the table at 0-based *index*.

    >>> csv_filename(0)
    'table_1.csv'
    """
    return CSV_FILENAME_TEMPLATE.format(index=index + 1)


def is_url(source: str) -> bool:
    """True when *source* names an ``http(s)://`` resource."""
    return source.startswith(URL_SCHEMES)
