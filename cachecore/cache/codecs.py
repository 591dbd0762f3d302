"""
Codecs turn typed values into payload bytes and back.

`JsonCodec` is the default. It is built on a pydantic `TypeAdapter`, so any
type pydantic can validate round-trips: builtins, containers, dataclasses,
TypedDicts and `BaseModel` subclasses. Decoding validates the payload against
the type, which means a malformed or mismatched payload raises instead of
producing a half-built value.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Type, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Codec(ABC, Generic[T]):
    """Converts values of one type to bytes and back."""

    @abstractmethod
    def encode(self, value: T) -> bytes:
        """Serialize `value`. Raises if the value cannot be encoded."""
        pass

    @abstractmethod
    def decode(self, data: bytes) -> T:
        """Deserialize `data`. Raises if the payload is malformed."""
        pass


class JsonCodec(Codec[T]):
    """
    JSON codec for a given value type.

    Errors are raised as pydantic raises them: `PydanticSerializationError`
    on encode, `ValidationError` on decode.
    """

    def __init__(self, value_type: Type[T] = Any):  # type: ignore[assignment]
        self.value_type = value_type
        self._adapter = TypeAdapter(value_type)

    def encode(self, value: T) -> bytes:
        return self._adapter.dump_json(value)

    def decode(self, data: bytes) -> T:
        return self._adapter.validate_json(data)

    def __repr__(self) -> str:
        return f"JsonCodec({self.value_type!r})"
