from typing import Iterable

import pytest

from cachecore.cache.app import CacheApp
from cachecore.cache.memory import MemoryStore


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep settings tests independent of the developer's environment
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "LOG_LEVEL",
        "REDIS_SERVER_URL",
        "REDIS_PASSWORD",
        "REDIS_DB",
        "REDIS_PROTOCOL_VERSION",
        "CACHE_DEFAULT_TTL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


class FailingStore(MemoryStore):
    """MemoryStore that raises on selected operations, for failure-path tests."""

    def __init__(
        self,
        fail_delete: Iterable[str] = (),
        fail_set: bool = False,
        fail_add_to_set: bool = False,
        fail_get: bool = False,
    ):
        super().__init__()
        self.fail_delete = set(fail_delete)
        self.fail_set = fail_set
        self.fail_add_to_set = fail_add_to_set
        self.fail_get = fail_get
        self.deleted = []

    async def get(self, key):
        if self.fail_get:
            raise ConnectionError("backend down")
        return await super().get(key)

    async def set(self, key, value, ttl=None):
        if self.fail_set:
            raise ConnectionError("backend down")
        await super().set(key, value, ttl)

    async def delete(self, key):
        if key in self.fail_delete:
            raise ConnectionError(f"delete failed: {key}")
        await super().delete(key)
        self.deleted.append(key)

    async def add_to_set(self, set_key, member):
        if self.fail_add_to_set:
            raise ConnectionError("backend down")
        await super().add_to_set(set_key, member)


@pytest.fixture
def store():
    """Fresh in-process store."""
    return MemoryStore()


@pytest.fixture
def cache_app(store):
    """CacheApp over the in-process store with a 60s default TTL."""
    return CacheApp(store, default_ttl=60)


@pytest.fixture
def make_failing_store():
    """Factory for FailingStore instances."""
    return FailingStore
