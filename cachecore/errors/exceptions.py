"""
Exception classes for the cache layer.

Backend transport errors and codec errors are not wrapped by these classes;
they reach the caller exactly as the store or codec raised them. The classes
below cover configuration and lifecycle misuse only.
"""

from typing import Any, Dict, Optional


class CacheError(Exception):
    """
    Base exception for all cache layer errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: CACHE_ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected cache error occurred",
        code: str = "CACHE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigNotFoundError(CacheError):
    """Exception raised when a store is created without configuration."""

    def __init__(
        self,
        message: str = "configuration not found",
        code: str = "CONFIG_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class InvalidConfigError(CacheError):
    """Exception raised when a configuration field holds an unusable value."""

    def __init__(
        self,
        message: str = "invalid configuration",
        field: Optional[str] = None,
        value: Any = None,
        code: str = "INVALID_CONFIG",
        details: Optional[Dict[str, Any]] = None,
    ):
        if field:
            message = f"invalid value for {field}: {value!r}"
            details = details or {}
            details.update({"field": field, "value": value})

        super().__init__(message=message, code=code, details=details)


class NoConnectionError(CacheError):
    """Exception raised when the cache is used or closed before a store is attached."""

    def __init__(
        self,
        message: str = "no cache connection",
        code: str = "NO_CONNECTION",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class CacheVariantNotFoundError(CacheError):
    """Exception raised when a store variant is not registered."""

    def __init__(
        self,
        message: str = "cache variant not found",
        variant: Optional[str] = None,
        code: str = "CACHE_VARIANT_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        if variant:
            message = f"cache variant '{variant}' not found"
            details = details or {}
            details["variant"] = variant

        super().__init__(message=message, code=code, details=details)
