"""
Source loader: obtain raw HTML text from a file path or an ``http(s)://`` URL.
"""

from __future__ import annotations

import codecs
import http.client
import logging
import urllib.error
import urllib.request
from pathlib import Path

from config import DEBUG_PREVIEW_CHARS, DEFAULT_ENCODING, FETCH_TIMEOUT, is_url
from errors import SourceLoadError

logger = logging.getLogger(__name__)


def load(source: str) -> str:
    """Return the HTML text named by *source*.

    URLs are fetched with a plain GET; anything else is read from disk.

    Raises
    ------
    SourceLoadError
        With ``stage`` set to ``"fetch"``, ``"read"`` or ``"decode"``.
    """
    html = _fetch_url(source) if is_url(source) else _read_file(source)
    logger.debug("Fetched HTML content:\n%s\n", html[:DEBUG_PREVIEW_CHARS])
    return html


def _fetch_url(url: str) -> str:
    try:
        with urllib.request.urlopen(url, timeout=FETCH_TIMEOUT) as response:
            body = response.read()
            charset = response.headers.get_content_charset() or DEFAULT_ENCODING
    except urllib.error.HTTPError as exc:
        raise SourceLoadError("fetch", url, f"HTTP {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise SourceLoadError("fetch", url, str(exc.reason)) from exc
    except (http.client.HTTPException, OSError, ValueError) as exc:
        raise SourceLoadError("fetch", url) from exc

    try:
        codecs.lookup(charset)
    except LookupError:
        # Unknown charset label in the response headers
        charset = DEFAULT_ENCODING

    try:
        return body.decode(charset)
    except UnicodeDecodeError as exc:
        raise SourceLoadError("decode", url, f"response is not valid {charset}") from exc


def _read_file(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding=DEFAULT_ENCODING)
    except UnicodeDecodeError as exc:
        raise SourceLoadError("decode", path, f"file is not valid {DEFAULT_ENCODING}") from exc
    except OSError as exc:
        raise SourceLoadError("read", path, exc.strerror or "") from exc
