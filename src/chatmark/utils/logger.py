"""Logging helpers for chatmark.

The library only creates loggers; handlers and levels are left to the
application embedding it.

Example:
    >>> from chatmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("segmenting message")
"""

from __future__ import annotations

import logging

_ROOT = "chatmark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``chatmark`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("segmenter").name
        'chatmark.segmenter'
        >>> get_logger("chatmark.blocks").name
        'chatmark.blocks'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
