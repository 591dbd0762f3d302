"""
Logging module for the cache layer.

Limitations:
- Only console (stdout) logging is supported out of the box.
- JSON logs include only timestamp, level, logger name and message.
"""

from cachecore.logging.formatters import JsonFormatter
from cachecore.logging.manager import Logger, ensure_logger, get_logger, setup_logger

__all__ = [
    "Logger",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "JsonFormatter",
]
