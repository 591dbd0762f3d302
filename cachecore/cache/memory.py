"""
In-process store.

Useful for tests and for single-process applications that want the cache
API without a Redis server. Expiry is checked on read; every write also
drops entries whose TTL has passed, so unread keys do not pile up.
"""

import time
from datetime import timedelta
from typing import Dict, List, Optional, Tuple

from cachecore.cache.base import TTL, BaseStore
from cachecore.errors.exceptions import NoConnectionError
from cachecore.logging import Logger, ensure_logger


class MemoryStore(BaseStore):
    """
    Dict-backed store.

    Sets keep insertion order. Strings and sets share one keyspace the way
    they do in Redis, so `delete` removes either kind.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._values: Dict[str, Tuple[bytes, Optional[float]]] = {}
        self._sets: Dict[str, Dict[str, None]] = {}
        self._closed = False
        self._logger = ensure_logger(logger, __name__)

    def _ensure_open(self) -> None:
        if self._closed:
            raise NoConnectionError("Memory store is closed")

    @staticmethod
    def _expires_at(ttl: TTL) -> Optional[float]:
        if not ttl:
            return None
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else ttl
        return time.monotonic() + seconds

    def _prune_expired(self) -> None:
        now = time.monotonic()
        expired = [
            key
            for key, (_, expires_at) in self._values.items()
            if expires_at is not None and expires_at <= now
        ]
        for key in expired:
            del self._values[key]

    async def get(self, key: str) -> Tuple[bool, Optional[bytes]]:
        self._ensure_open()
        entry = self._values.get(key)
        if entry is None:
            return False, None
        value, expires_at = entry
        if expires_at is not None and expires_at <= time.monotonic():
            del self._values[key]
            self._logger.debug(f"Expired key: {key}")
            return False, None
        return True, value

    async def set(self, key: str, value: bytes, ttl: TTL = None) -> None:
        self._ensure_open()
        self._prune_expired()
        self._sets.pop(key, None)
        self._values[key] = (bytes(value), self._expires_at(ttl))

    async def delete(self, key: str) -> None:
        self._ensure_open()
        self._values.pop(key, None)
        self._sets.pop(key, None)

    async def add_to_set(self, set_key: str, member: str) -> None:
        self._ensure_open()
        self._sets.setdefault(set_key, {})[member] = None

    async def members_of_set(self, set_key: str) -> List[str]:
        self._ensure_open()
        return list(self._sets.get(set_key, {}))

    async def close(self) -> None:
        self._values.clear()
        self._sets.clear()
        self._closed = True
