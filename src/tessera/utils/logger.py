"""Minimal logging utilities for Tessera.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications decide where records go.

Example:
    >>> from tessera.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Merged %d class tokens", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tessera." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tessera.mymodule'
    """
    if not (name == "tessera" or name.startswith("tessera.")):
        name = f"tessera.{name}"
    return logging.getLogger(name)
