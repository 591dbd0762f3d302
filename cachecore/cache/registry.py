from typing import Dict, List, Optional

from cachecore.cache.base import BaseStore
from cachecore.errors.exceptions import CacheVariantNotFoundError
from cachecore.logging import Logger, ensure_logger


class StoreRegistry:
    """
    Name-to-store lookup table, filled at startup.

    Lets an application configure several store variants (e.g. "redis" and
    "memory") and pick one by name.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._stores: Dict[str, BaseStore] = {}
        self._logger = ensure_logger(logger, __name__)

    def register(self, name: str, store: BaseStore) -> None:
        if name in self._stores:
            self._logger.warning(f"Replacing registered store variant: {name}")
        self._stores[name] = store
        self._logger.debug(f"Registered store variant: {name}")

    def get(self, name: str) -> BaseStore:
        """
        Look up a store by variant name.

        Raises:
            CacheVariantNotFoundError: if no store is registered under `name`
        """
        try:
            return self._stores[name]
        except KeyError:
            raise CacheVariantNotFoundError(variant=name) from None

    def names(self) -> List[str]:
        return list(self._stores)

    def __contains__(self, name: object) -> bool:
        return name in self._stores
