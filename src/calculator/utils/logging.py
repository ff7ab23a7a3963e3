"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "calculator"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a Rich handler on stderr to the package logger.

    Calling again replaces the previous handler so repeated CLI invocations
    in one process do not duplicate output.

    Args:
        level: Level name or number

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
