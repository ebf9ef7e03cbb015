"""
Exceptions raised by the extraction pipeline.

Every terminal failure is an ``ExtractionError`` annotated with the pipeline
*stage* that failed and the *target* (URL, path) it was working on.  The
underlying exception is always chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class ExtractionError(Exception):
    """Base class for acquisition and output failures."""

    def __init__(self, stage: str, target: str | Path, message: str = "") -> None:
        self.stage = stage
        self.target = str(target)
        detail = f": {message}" if message else ""
        super().__init__(f"Failed to {stage} {self.target}{detail}")


class SourceLoadError(ExtractionError):
    """The HTML source could not be fetched, read or decoded."""


class OutputError(ExtractionError):
    """A CSV file or its directory could not be written."""


def format_error_chain(exc: BaseException) -> list[str]:
    """Return *exc* followed by each chained cause, one line per exception."""
    lines = [str(exc)]
    cause = exc.__cause__ or exc.__context__
    while cause is not None:
        lines.append(f"caused by: {type(cause).__name__}: {cause}")
        cause = cause.__cause__ or cause.__context__
    return lines
