"""
Base configuration module for the cache layer.

Settings are read from environment variables or a `.env` file when a caller
constructs them. Nothing in the cache layer loads settings on its own; the
resulting object is passed explicitly to the store adapter.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class CacheSettings(BaseSettings):
    """
    Settings for the cache layer and its Redis store.

    Attributes:
        APP_NAME: The name of the application using the cache
        DEBUG: Flag to enable debug logging
        LOG_LEVEL: Logging level for cache loggers
        LOG_JSON_FORMAT: Emit JSON log lines instead of plain text
        REDIS_SERVER_URL: Redis address, either host:port or a redis:// URL
        REDIS_PASSWORD: Redis password (empty for none)
        REDIS_DB: Logical database number, as a numeric string
        REDIS_PROTOCOL_VERSION: RESP protocol version (2 or 3), as a numeric string
        CACHE_DEFAULT_TTL: Default TTL in seconds for cache builders
        CACHE_CONNECT_TIMEOUT: Seconds to wait for the initial ping
    """

    APP_NAME: str = Field(default="cachecore")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON_FORMAT: bool = Field(default=False, description="Emit JSON log lines")

    # Redis configuration
    REDIS_SERVER_URL: str = Field(
        default="localhost:6379",
        description="Redis address (host:port or redis:// URL)",
    )
    REDIS_PASSWORD: str = Field(default="", description="Redis password")
    REDIS_DB: str = Field(default="0", description="Redis logical database")
    REDIS_PROTOCOL_VERSION: str = Field(
        default="2", description="RESP protocol version"
    )

    # Cache behaviour
    CACHE_DEFAULT_TTL: Optional[int] = Field(
        default=300, description="Default cache TTL in seconds (None for no expiry)"
    )
    CACHE_CONNECT_TIMEOUT: float = Field(
        default=5.0, description="Timeout in seconds for the initial Redis ping"
    )

    @field_validator("REDIS_SERVER_URL", mode="before")
    def validate_server_url(cls, value):
        """
        Ensure REDIS_SERVER_URL is a host:port pair or a redis:// / rediss:// URL.
        """
        if not value:
            raise ValueError("REDIS_SERVER_URL must not be empty")
        if "://" in value and not (
            value.startswith("redis://") or value.startswith("rediss://")
        ):
            raise ValueError(
                "REDIS_SERVER_URL must be host:port or start with 'redis://' or "
                f"'rediss://'. You provided: {value}"
            )
        return value

    @field_validator("CACHE_DEFAULT_TTL")
    def validate_default_ttl(cls, value):
        if value is not None and value <= 0:
            raise ValueError("CACHE_DEFAULT_TTL must be positive or unset")
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
