"""Process-wide logging set-up for the command line entry point."""

from __future__ import annotations

import logging
import sys

HANDLER_NAME = "recipescraper-cli"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again only adjusts the level.
    """
    package_logger = logging.getLogger("recipescraper")
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(handler.get_name() == HANDLER_NAME for handler in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
