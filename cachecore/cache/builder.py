from typing import Any, Optional, Type

from cachecore.cache import keys
from cachecore.cache.base import TTL, BaseStore, run_with_timeout
from cachecore.cache.codecs import Codec, JsonCodec
from cachecore.cache.instance import CacheInstance
from cachecore.logging import Logger, ensure_logger


class CacheBuilder:
    """
    Produces cache instances for one resource and invalidates them as a group.

    Every instance written through this builder registers its key in the
    resource's index set (`<resource>:index`), which `invalidate_all` uses
    to find the keys to delete.
    """

    def __init__(
        self,
        resource: str,
        store: BaseStore,
        value_type: Type[Any] = Any,  # type: ignore[assignment]
        ttl: TTL = None,
        codec: Optional[Codec] = None,
        logger: Optional[Logger] = None,
    ):
        if not resource:
            raise ValueError("resource is required")
        self._resource = resource
        self._store = store
        self._value_type = value_type
        self._ttl = ttl
        self._codec = codec
        self._logger = ensure_logger(logger, __name__)

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def ttl(self) -> TTL:
        return self._ttl

    @property
    def index_key(self) -> str:
        return keys.index_key(self._resource)

    def _instance(
        self,
        key: str,
        value_type: Optional[Type[Any]],
        codec: Optional[Codec],
    ) -> CacheInstance:
        if codec is None:
            if value_type is not None:
                codec = JsonCodec(value_type)
            else:
                codec = self._codec or JsonCodec(self._value_type)
        return CacheInstance(
            key=key,
            index_key=self.index_key,
            store=self._store,
            codec=codec,
            ttl=self._ttl,
            logger=self._logger,
        )

    def one(
        self,
        member_id: keys.MemberId,
        value_type: Optional[Type[Any]] = None,
        codec: Optional[Codec] = None,
    ) -> CacheInstance:
        """
        Instance for one member, keyed `<resource>:id:<member_id>`.

        `value_type` or `codec` override the builder's defaults for this
        instance only.
        """
        return self._instance(
            keys.member_key(self._resource, member_id), value_type, codec
        )

    def all(
        self,
        value_type: Optional[Type[Any]] = None,
        codec: Optional[Codec] = None,
    ) -> CacheInstance:
        """
        Instance for the resource as a whole, keyed `<resource>:all`.

        The whole-collection value usually has a different shape than a
        single member (e.g. `List[User]`), so pass `value_type` for it.
        """
        return self._instance(keys.collection_key(self._resource), value_type, codec)

    async def invalidate_all(self, timeout: Optional[float] = None) -> None:
        """
        Delete every key ever written for this resource, then the index set.

        Keys are deleted one by one in sorted order. The first failed delete
        aborts the run and its error is raised; the remaining keys and the
        index set are left in place so that calling again resumes the work.
        """
        await run_with_timeout(self._invalidate_all(), timeout)

    async def _invalidate_all(self) -> None:
        index = self.index_key
        members = sorted(await self._store.members_of_set(index))
        for key in members:
            await self._store.delete(key)
        await self._store.delete(index)
        self._logger.debug(
            f"Invalidated {len(members)} keys for resource: {self._resource}"
        )

    def __repr__(self) -> str:
        return f"CacheBuilder(resource={self._resource!r}, ttl={self._ttl!r})"
