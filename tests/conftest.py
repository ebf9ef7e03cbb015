import logging

import pytest


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the stdout handler installed by ``setup_logging`` after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "html_tables_cli", False):
            root.removeHandler(handler)
    root.setLevel(level)
