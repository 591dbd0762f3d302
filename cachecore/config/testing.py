"""
Testing environment specific settings.
"""

from .base import CacheSettings


class TestingSettings(CacheSettings):
    """
    Settings class for the testing environment.

    Enables debug logging and uses a separate logical database so test runs
    never touch application keys.
    """

    DEBUG: bool = True
    REDIS_DB: str = "15"
