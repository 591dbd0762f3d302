from typing import Any, Optional, Type

from cachecore.cache.backends import RedisStore
from cachecore.cache.base import TTL, BaseStore
from cachecore.cache.builder import CacheBuilder
from cachecore.cache.codecs import Codec
from cachecore.cache.registry import StoreRegistry
from cachecore.config.base import CacheSettings
from cachecore.errors.exceptions import NoConnectionError
from cachecore.logging import Logger, ensure_logger


class CacheApp:
    """
    Owner of the store connection and factory for cache builders.

    The app is the only object allowed to close the store. Builders and
    instances it hands out keep a borrowed reference.

    Example:
        ```python
        app = await CacheApp.from_settings(CacheSettings())
        users = app.build("user", User)

        user = await users.one(42).lazy_fetch(lambda: repo.get(42))
        await users.invalidate_all()

        await app.close()
        ```
    """

    def __init__(
        self,
        store: Optional[BaseStore] = None,
        default_ttl: TTL = None,
        logger: Optional[Logger] = None,
    ):
        self._store = store
        self._default_ttl = default_ttl
        self._logger = ensure_logger(logger, __name__)

    @classmethod
    async def from_settings(
        cls, settings: Optional[CacheSettings], logger: Optional[Logger] = None
    ) -> "CacheApp":
        """Connect a Redis store from explicit settings and wrap it."""
        store = await RedisStore.connect(settings, logger=logger)
        return cls(store, default_ttl=settings.CACHE_DEFAULT_TTL, logger=logger)

    @classmethod
    def from_registry(
        cls,
        registry: StoreRegistry,
        variant: str,
        default_ttl: TTL = None,
        logger: Optional[Logger] = None,
    ) -> "CacheApp":
        """
        Wrap the store registered under `variant`.

        Raises:
            CacheVariantNotFoundError: if the variant is not registered
        """
        return cls(registry.get(variant), default_ttl=default_ttl, logger=logger)

    @property
    def store(self) -> Optional[BaseStore]:
        return self._store

    def attach(self, store: BaseStore) -> None:
        """Attach a store to an app created without one."""
        if self._store is not None:
            raise RuntimeError("A store is already attached")
        self._store = store

    def build(
        self,
        resource: str,
        value_type: Type[Any] = Any,  # type: ignore[assignment]
        ttl: TTL = None,
        codec: Optional[Codec] = None,
    ) -> CacheBuilder:
        """
        Create a builder for `resource`. No I/O happens here.

        Args:
            resource: Resource name used as key namespace (e.g. "user")
            value_type: Type of cached values, used by the default JSON codec
            ttl: Expiry for values written through this builder; falls back
                to the app's default TTL
            codec: Codec to use instead of the default JSON codec

        Raises:
            NoConnectionError: if no store is attached
        """
        if self._store is None:
            raise NoConnectionError()
        return CacheBuilder(
            resource,
            self._store,
            value_type=value_type,
            ttl=ttl if ttl is not None else self._default_ttl,
            codec=codec,
            logger=self._logger,
        )

    async def close(self) -> None:
        """
        Close the store and detach it.

        Raises:
            NoConnectionError: if no store is attached, including when the
                app was already closed
        """
        if self._store is None:
            raise NoConnectionError()
        await self._store.close()
        self._store = None
        self._logger.debug("Cache store closed")

    async def __aenter__(self) -> "CacheApp":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._store is not None:
            await self.close()
