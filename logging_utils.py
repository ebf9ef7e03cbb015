"""
Logging setup for the command-line driver.
"""

from __future__ import annotations

import logging
import sys

from config import DEBUG_LOG_FORMAT, LOG_FORMAT


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the root logger for the CLI.

    Debug mode sends the grid-construction trace to standard output;
    otherwise only warnings and errors are shown.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    # Replace our own handler so it always targets the current sys.stdout
    for handler in list(logger.handlers):
        if getattr(handler, "html_tables_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.html_tables_cli = True
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT))
    logger.addHandler(handler)
    return logger
