import inspect
from typing import Awaitable, Callable, Generic, Optional, TypeVar, Union

from cachecore.cache.base import TTL, BaseStore, run_with_timeout
from cachecore.cache.codecs import Codec
from cachecore.logging import Logger, ensure_logger

T = TypeVar("T")

Fetcher = Callable[[], Union[T, Awaitable[T]]]


class CacheInstance(Generic[T]):
    """
    Typed get/set/delete/lazy-fetch surface bound to one fully-qualified key.

    Instances are created by `CacheBuilder.one` and `CacheBuilder.all`. They
    hold a borrowed reference to the store and never close it.

    Every operation takes an optional `timeout` in seconds which bounds the
    whole operation; asyncio cancellation aborts the in-flight store call.

    Example:
        ```python
        users = app.build("user", User, ttl=600)
        cached = users.one(user.id)

        await cached.set(user)
        user = await cached.get()  # None on a miss
        ```
    """

    def __init__(
        self,
        key: str,
        index_key: str,
        store: BaseStore,
        codec: Codec[T],
        ttl: TTL = None,
        logger: Optional[Logger] = None,
    ):
        self._key = key
        self._index_key = index_key
        self._store = store
        self._codec = codec
        self._ttl = ttl
        self._logger = ensure_logger(logger, __name__)

    @property
    def key(self) -> str:
        return self._key

    @property
    def ttl(self) -> TTL:
        return self._ttl

    async def get(self, timeout: Optional[float] = None) -> Optional[T]:
        """
        Read and decode the cached value.

        Returns None on a miss. Store errors and decode errors propagate;
        a payload that fails to decode is not treated as a miss.
        """
        return await run_with_timeout(self._get(), timeout)

    async def _get(self) -> Optional[T]:
        hit, data = await self._store.get(self._key)
        if not hit:
            self._logger.debug(f"Cache miss for key: {self._key}")
            return None
        self._logger.debug(f"Cache hit for key: {self._key}")
        return self._codec.decode(data)

    async def set(self, value: T, timeout: Optional[float] = None) -> None:
        """
        Encode and write `value`, then register the key in the index set.

        An encode failure raises before the store is touched. The two store
        writes are not atomic: if the index update fails, the payload stays
        readable but `invalidate_all` will not see it.
        """
        await run_with_timeout(self._set(value), timeout)

    async def _set(self, value: T) -> None:
        payload = self._codec.encode(value)
        await self._store.set(self._key, payload, self._ttl)
        await self._store.add_to_set(self._index_key, self._key)
        self._logger.debug(f"Cache set for key: {self._key} (ttl={self._ttl})")

    async def delete(self, timeout: Optional[float] = None) -> None:
        """
        Remove the cached value. Deleting a missing key is not an error.

        The key stays listed in the index set until the next `invalidate_all`.
        """
        await run_with_timeout(self._store.delete(self._key), timeout)
        self._logger.debug(f"Cache delete for key: {self._key}")

    async def lazy_fetch(self, fetch: Fetcher, timeout: Optional[float] = None) -> T:
        """
        Return the cached value, or produce it with `fetch` and cache it.

        `fetch` takes no arguments and may be a plain or an async callable.
        It is called at most once, and only on a miss; a payload that decodes
        to None is still a hit. If `fetch` raises, nothing is written. If
        caching the fetched value fails, that error is raised and the fetched
        value is discarded.
        """
        return await run_with_timeout(self._lazy_fetch(fetch), timeout)

    async def _lazy_fetch(self, fetch: Fetcher) -> T:
        # Branch on the store's hit flag; a payload may decode to None
        hit, data = await self._store.get(self._key)
        if hit:
            self._logger.debug(f"Cache hit for key: {self._key}")
            return self._codec.decode(data)
        self._logger.debug(f"Cache miss for key: {self._key}")

        value = fetch()
        if inspect.isawaitable(value):
            value = await value

        await self._set(value)
        return value

    def __repr__(self) -> str:
        return f"CacheInstance(key={self._key!r}, ttl={self._ttl!r})"
