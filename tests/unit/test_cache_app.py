"""
Unit tests for cache.app.

Covers:
- build() with default and explicit TTL
- Lifecycle: attach, close, double close, async context manager
- Factories: from_settings (Redis) and from_registry
"""

from unittest.mock import AsyncMock, patch

import pytest

from cachecore.cache.app import CacheApp
from cachecore.cache.builder import CacheBuilder
from cachecore.cache.memory import MemoryStore
from cachecore.cache.registry import StoreRegistry
from cachecore.config.base import CacheSettings
from cachecore.errors import (
    CacheVariantNotFoundError,
    ConfigNotFoundError,
    NoConnectionError,
)


def test_build_returns_builder_for_resource(cache_app):
    builder = cache_app.build("user", str)
    assert isinstance(builder, CacheBuilder)
    assert builder.resource == "user"
    assert builder.ttl == 60


def test_build_explicit_ttl_overrides_default(cache_app):
    assert cache_app.build("user", ttl=5).ttl == 5


def test_build_without_store_raises():
    with pytest.raises(NoConnectionError):
        CacheApp().build("user")


def test_attach_store(store):
    app = CacheApp()
    app.attach(store)
    assert app.store is store
    with pytest.raises(RuntimeError):
        app.attach(MemoryStore())


@pytest.mark.asyncio
async def test_end_to_end_lazy_fetch_through_app(cache_app, store):
    users = cache_app.build("user", str)

    assert await users.one("42").lazy_fetch(lambda: "alice") == "alice"
    assert await store.get("user:id:42") == (True, b'"alice"')


@pytest.mark.asyncio
async def test_close_without_store_raises():
    with pytest.raises(NoConnectionError):
        await CacheApp().close()


@pytest.mark.asyncio
async def test_close_releases_store_once():
    store = AsyncMock(spec=MemoryStore)
    app = CacheApp(store)

    await app.close()
    store.close.assert_awaited_once()
    assert app.store is None

    with pytest.raises(NoConnectionError):
        await app.close()
    store.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_propagates_store_error():
    store = AsyncMock(spec=MemoryStore)
    store.close.side_effect = ConnectionError("close failed")
    app = CacheApp(store)

    with pytest.raises(ConnectionError):
        await app.close()


@pytest.mark.asyncio
async def test_builders_do_not_close_store(cache_app, store):
    users = cache_app.build("user", str)
    await users.one("1").set("alice")
    await users.invalidate_all()

    # store still usable
    await store.set("k", b"v")
    assert await store.get("k") == (True, b"v")


@pytest.mark.asyncio
async def test_async_context_manager_closes_store():
    store = AsyncMock(spec=MemoryStore)
    async with CacheApp(store) as app:
        assert app.store is store
    store.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_context_manager_after_explicit_close():
    store = AsyncMock(spec=MemoryStore)
    async with CacheApp(store) as app:
        await app.close()
    store.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_from_settings_uses_redis_store_and_default_ttl():
    settings = CacheSettings(CACHE_DEFAULT_TTL=120)
    redis_store = AsyncMock()
    with patch(
        "cachecore.cache.app.RedisStore.connect", AsyncMock(return_value=redis_store)
    ) as connect:
        app = await CacheApp.from_settings(settings)

    connect.assert_awaited_once()
    assert connect.await_args.args[0] is settings
    assert app.store is redis_store
    assert app.build("user").ttl == 120


@pytest.mark.asyncio
async def test_from_settings_without_settings_raises():
    with pytest.raises(ConfigNotFoundError):
        await CacheApp.from_settings(None)


def test_from_registry_picks_variant(store):
    registry = StoreRegistry()
    registry.register("memory", store)

    app = CacheApp.from_registry(registry, "memory", default_ttl=30)
    assert app.store is store
    assert app.build("user").ttl == 30


def test_from_registry_unknown_variant():
    with pytest.raises(CacheVariantNotFoundError):
        CacheApp.from_registry(StoreRegistry(), "redis")
