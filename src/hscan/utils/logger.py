"""Minimal logging utilities for hscan.

Provides a simple get_logger function that wraps the standard library logging.
Library code never installs handlers; configuring output is left to the
application (the ``python -m hscan`` entry point calls ``basicConfig``).

Example:
    >>> from hscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %s", "Foo.cpp")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'hscan.mymodule'
    """
    if not (name == "hscan" or name.startswith("hscan.")):
        name = f"hscan.{name}"
    return logging.getLogger(name)
