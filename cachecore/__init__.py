"""
cachecore - typed caching facade over a key-value store.

Usage:
    from cachecore import CacheApp, CacheSettings

    app = await CacheApp.from_settings(CacheSettings())
    users = app.build("user", User, ttl=600)

    user = await users.one(42).lazy_fetch(load_user)
    await users.invalidate_all()
"""

__version__ = "0.1.0"

from cachecore.cache import (
    BaseStore,
    CacheApp,
    CacheBuilder,
    CacheInstance,
    Codec,
    JsonCodec,
    MemoryStore,
    RedisStore,
    StoreRegistry,
)
from cachecore.config import CacheSettings, get_settings
from cachecore.errors import (
    CacheError,
    CacheVariantNotFoundError,
    ConfigNotFoundError,
    InvalidConfigError,
    NoConnectionError,
)
from cachecore.logging import get_logger
