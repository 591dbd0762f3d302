import sys
from typing import Optional

from fastapi import FastAPI

from cachecore.cache.app import CacheApp
from cachecore.config.base import CacheSettings
from cachecore.errors.exceptions import NoConnectionError
from cachecore.logging import Logger, ensure_logger

# Module-level cache app
cache_app: Optional[CacheApp] = None


async def get_cache_app() -> CacheApp:
    """
    FastAPI dependency for retrieving the cache app.

    Raises NoConnectionError if the cache is not initialized (e.g. Redis was
    unreachable at startup).
    """
    manager_mod = sys.modules.get("cachecore.cache.manager")
    instance = getattr(manager_mod, "cache_app", None)
    if instance is None:
        raise NoConnectionError("Cache not initialized")

    return instance


def setup_cache(
    app: FastAPI,
    settings: CacheSettings,
    logger: Optional[Logger] = None,
) -> None:
    """
    Configure the cache lifecycle for a FastAPI application.

    - On startup: connect a Redis store and create the CacheApp
    - On shutdown: close the CacheApp (and with it the store)
    - Provides the get_cache_app dependency

    Limitations:
    - Only the Redis store is wired here
    - No fallback if Redis is unavailable; the dependency raises instead
    """
    log = ensure_logger(logger, __name__, settings)

    async def init_cache():
        global cache_app
        try:
            cache_app = await CacheApp.from_settings(settings, logger=log)
            log.info(f"Cache initialized (addr={settings.REDIS_SERVER_URL})")
        except Exception as e:
            cache_app = None
            log.error(f"Cache initialization failed: {e}")

    async def shutdown_cache():
        global cache_app
        if cache_app is not None:
            await cache_app.close()
            cache_app = None
            log.info("Cache closed")

    app.add_event_handler("startup", init_cache)
    app.add_event_handler("shutdown", shutdown_cache)
