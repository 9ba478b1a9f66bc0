"""Utility modules for hscan.

Provides:
- logger: get_logger for namespaced logging
"""

from hscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
