import asyncio
from typing import List, Optional, Tuple

from redis import asyncio as aredis  # type: ignore

from cachecore.cache.base import TTL, BaseStore
from cachecore.config.base import CacheSettings
from cachecore.errors.exceptions import (
    ConfigNotFoundError,
    InvalidConfigError,
    NoConnectionError,
)
from cachecore.logging import Logger, ensure_logger

SUPPORTED_PROTOCOLS = (2, 3)


def _parse_int(field: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigError(field=field, value=value) from None


class RedisStore(BaseStore):
    """
    Redis-based store implementation.

    Payloads are kept as raw bytes (no response decoding); set members are
    decoded to str since they are always cache keys.
    """

    def __init__(self, client: aredis.Redis, logger: Optional[Logger] = None):
        self._redis: Optional[aredis.Redis] = client
        self._logger = ensure_logger(logger, __name__)

    @classmethod
    async def connect(
        cls,
        settings: Optional[CacheSettings],
        logger: Optional[Logger] = None,
    ) -> "RedisStore":
        """
        Create a client from settings and verify it with a bounded ping.

        Raises:
            ConfigNotFoundError: settings is None
            InvalidConfigError: REDIS_DB or REDIS_PROTOCOL_VERSION is not a number,
                or the protocol version is unsupported
        """
        if settings is None:
            raise ConfigNotFoundError()

        log = ensure_logger(logger, __name__, settings)
        db = _parse_int("REDIS_DB", settings.REDIS_DB)
        protocol = _parse_int("REDIS_PROTOCOL_VERSION", settings.REDIS_PROTOCOL_VERSION)
        if protocol not in SUPPORTED_PROTOCOLS:
            raise InvalidConfigError(field="REDIS_PROTOCOL_VERSION", value=protocol)

        client = cls._create_client(settings, db, protocol)
        try:
            await asyncio.wait_for(client.ping(), settings.CACHE_CONNECT_TIMEOUT)
        except Exception as e:
            log.error(f"Redis ping failed for {settings.REDIS_SERVER_URL}: {e!r}")
            await client.aclose()
            raise

        log.info(f"Redis store connected (addr={settings.REDIS_SERVER_URL}, db={db})")
        return cls(client, logger=log)

    @staticmethod
    def _create_client(settings: CacheSettings, db: int, protocol: int) -> aredis.Redis:
        address = settings.REDIS_SERVER_URL
        password = settings.REDIS_PASSWORD or None
        if "://" in address:
            return aredis.from_url(
                address, password=password, db=db, protocol=protocol
            )

        host, _, port = address.rpartition(":")
        if not host:
            host, port = address, "6379"
        return aredis.Redis(
            host=host,
            port=_parse_int("REDIS_SERVER_URL", port),
            password=password,
            db=db,
            protocol=protocol,
        )

    def _client(self) -> aredis.Redis:
        if self._redis is None:
            raise NoConnectionError("Redis connection is closed")
        return self._redis

    async def get(self, key: str) -> Tuple[bool, Optional[bytes]]:
        client = self._client()
        try:
            result = await client.get(key)
        except Exception as e:
            self._logger.error(f"Store get error for key {key}: {e!r}")
            raise
        if result is None:
            return False, None
        return True, result

    async def set(self, key: str, value: bytes, ttl: TTL = None) -> None:
        client = self._client()
        try:
            await client.set(key, value, ex=ttl or None)
        except Exception as e:
            self._logger.error(f"Store set error for key {key}: {e!r}")
            raise

    async def delete(self, key: str) -> None:
        client = self._client()
        try:
            await client.delete(key)
        except Exception as e:
            self._logger.error(f"Store delete error for key {key}: {e!r}")
            raise

    async def add_to_set(self, set_key: str, member: str) -> None:
        client = self._client()
        try:
            await client.sadd(set_key, member)
        except Exception as e:
            self._logger.error(f"Store sadd error for key {set_key}: {e!r}")
            raise

    async def members_of_set(self, set_key: str) -> List[str]:
        client = self._client()
        try:
            members = await client.smembers(set_key)
        except Exception as e:
            self._logger.error(f"Store smembers error for key {set_key}: {e!r}")
            raise
        return [m.decode("utf-8") if isinstance(m, bytes) else m for m in members]

    async def close(self) -> None:
        if self._redis is None:
            return
        try:
            await self._redis.aclose()
        except Exception as e:
            self._logger.error(f"Store close error: {e!r}")
            raise
        self._redis = None
        self._logger.debug("Redis connection closed")
