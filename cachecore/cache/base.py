import asyncio
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Awaitable, List, Optional, Tuple, TypeVar, Union

R = TypeVar("R")

# TTL in seconds or as a timedelta; None means the key never expires
TTL = Optional[Union[int, timedelta]]


class BaseStore(ABC):
    """
    Abstract base class for key-value stores used by the cache layer.

    Stores deal in raw bytes and plain string keys. Encoding, key layout and
    index bookkeeping all happen above this interface.
    """

    @abstractmethod
    async def get(self, key: str) -> Tuple[bool, Optional[bytes]]:
        """
        Retrieve a value by key.

        Returns `(hit, value)`. A missing key is `(False, None)`, never an
        exception; exceptions mean the store itself failed.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: bytes, ttl: TTL = None) -> None:
        """Store a value with an optional TTL."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error."""
        pass

    @abstractmethod
    async def add_to_set(self, set_key: str, member: str) -> None:
        """Add a member to the set stored at `set_key`."""
        pass

    @abstractmethod
    async def members_of_set(self, set_key: str) -> List[str]:
        """List the members of the set at `set_key` (empty if absent)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the store's resources."""
        pass


async def run_with_timeout(operation: Awaitable[R], timeout: Optional[float]) -> R:
    """Await `operation`, bounded by `timeout` seconds when one is given."""
    if timeout is None:
        return await operation
    return await asyncio.wait_for(operation, timeout)
