"""Minimal logging utilities for Casillas.

Every casillas module logs under the "casillas." namespace, so hosts can
turn on rewrite diagnostics with logging.getLogger("casillas").setLevel(DEBUG).

Example:
    >>> from casillas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rewrote %d task list item(s) in %d list(s)", 3, 1)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "casillas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'casillas.mymodule'
    """
    if not (name == "casillas" or name.startswith("casillas.")):
        name = f"casillas.{name}"
    return logging.getLogger(name)
