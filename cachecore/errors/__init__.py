"""
Error types for the cache layer.

Limitations:
- Only configuration and lifecycle errors have dedicated classes.
- Store and codec errors propagate as raised by the underlying library.
"""

from cachecore.errors.exceptions import (
    CacheError,
    CacheVariantNotFoundError,
    ConfigNotFoundError,
    InvalidConfigError,
    NoConnectionError,
)

__all__ = [
    "CacheError",
    "ConfigNotFoundError",
    "InvalidConfigError",
    "NoConnectionError",
    "CacheVariantNotFoundError",
]
