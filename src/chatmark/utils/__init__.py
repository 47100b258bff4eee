"""Utility modules for chatmark.

Provides:
- logger: get_logger for namespaced logging
"""

from chatmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
