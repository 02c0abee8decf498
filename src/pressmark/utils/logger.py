"""Minimal logging utilities for pressmark.

Provides a get_logger function that namespaces standard library loggers
under ``pressmark.``.

Example:
    >>> from pressmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("loading font %s", path)
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'pressmark.mymodule'
    """
    if not (name == "pressmark" or name.startswith("pressmark.")):
        name = f"pressmark.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send pressmark log records to stderr.

    Used by the command line. Library callers configure logging themselves.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
