import logging
import sys

from errors import ExtractionError, OutputError, SourceLoadError, format_error_chain
from logging_utils import setup_logging


def test_error_message_names_stage_and_target():
    exc = OutputError("create file", "/tmp/out/table_1.csv", "Permission denied")

    assert str(exc) == "Failed to create file /tmp/out/table_1.csv: Permission denied"
    assert isinstance(exc, ExtractionError)


def test_format_error_chain_follows_causes():
    try:
        try:
            raise FileNotFoundError(2, "No such file or directory")
        except OSError as inner:
            raise SourceLoadError("read", "page.html") from inner
    except SourceLoadError as exc:
        lines = format_error_chain(exc)

    assert lines == [
        "Failed to read page.html",
        "caused by: FileNotFoundError: [Errno 2] No such file or directory",
    ]


def test_setup_logging_levels():
    root = setup_logging(debug=True)
    assert root.level == logging.DEBUG

    setup_logging(debug=False)
    handlers = [h for h in root.handlers if getattr(h, "html_tables_cli", False)]
    assert root.level == logging.WARNING
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stdout
