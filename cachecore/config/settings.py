"""
Settings loading.

`get_settings` picks the settings class from the APP_ENV environment
variable. It is only called by code that asks for settings; the cache
layer itself always receives settings as an argument.
"""

import os

from .base import CacheSettings
from .testing import TestingSettings


def get_settings() -> CacheSettings:
    """
    Get the settings instance for the current environment.

    The environment is determined by the APP_ENV environment variable.
    If not set, defaults to 'development'.

    Returns:
        CacheSettings: An instance of environment-specific settings
    """
    env = os.getenv("APP_ENV", "development")
    if env == "testing":
        return TestingSettings()
    return CacheSettings()
