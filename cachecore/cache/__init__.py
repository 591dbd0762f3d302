"""
cachecore cache module: public API

Features:
- CacheApp: owns the store connection and creates builders
- CacheBuilder: derives keys for a resource and invalidates them as a group
- CacheInstance: typed get/set/delete/lazy-fetch for one key
- Redis and in-process stores behind the BaseStore interface
- Store registry for picking a store variant by name

Limitations:
- Writes and index updates are two separate store calls (not atomic)
- invalidate_all stops at the first failed delete
"""
from cachecore.cache.app import CacheApp
from cachecore.cache.backends import RedisStore
from cachecore.cache.base import BaseStore
from cachecore.cache.builder import CacheBuilder
from cachecore.cache.codecs import Codec, JsonCodec
from cachecore.cache.instance import CacheInstance
from cachecore.cache.memory import MemoryStore
from cachecore.cache.registry import StoreRegistry

# Do NOT re-export get_cache_app, setup_cache here; importing them pulls in FastAPI

__all__ = [
    "BaseStore",
    "CacheApp",
    "CacheBuilder",
    "CacheInstance",
    "Codec",
    "JsonCodec",
    "MemoryStore",
    "RedisStore",
    "StoreRegistry",
]
