"""
Configuration module for cachecore.

This module provides:
- CacheSettings: settings for the cache layer, loaded from environment variables.
- get_settings: Factory for loading the settings class based on APP_ENV.

Example environment variables:

APP_ENV="development"  # Options: development, testing
DEBUG=false
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false

REDIS_SERVER_URL="localhost:6379"
REDIS_PASSWORD=""
REDIS_DB="0"
REDIS_PROTOCOL_VERSION="2"

CACHE_DEFAULT_TTL=300
CACHE_CONNECT_TIMEOUT=5
"""

from .base import CacheSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "CacheSettings",
    "TestingSettings",
    "get_settings",
]
