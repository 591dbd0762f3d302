import pytest

from cachecore.cache.memory import MemoryStore
from cachecore.cache.registry import StoreRegistry
from cachecore.errors import CacheVariantNotFoundError


def test_register_and_get():
    registry = StoreRegistry()
    store = MemoryStore()
    registry.register("memory", store)

    assert registry.get("memory") is store
    assert "memory" in registry
    assert registry.names() == ["memory"]


def test_get_unknown_variant():
    registry = StoreRegistry()
    with pytest.raises(CacheVariantNotFoundError) as exc:
        registry.get("redis")
    assert exc.value.code == "CACHE_VARIANT_NOT_FOUND"
    assert exc.value.details == {"variant": "redis"}


def test_register_replaces_existing_variant():
    registry = StoreRegistry()
    first, second = MemoryStore(), MemoryStore()
    registry.register("memory", first)
    registry.register("memory", second)
    assert registry.get("memory") is second
