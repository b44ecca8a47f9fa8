"""Interface for value serialization.

A codec turns a value into the bytes stored in one cache file and back.
The file-backed cache only depends on this contract, not on a specific
serialization library.
"""

import abc
from typing import Generic, TypeVar

T = TypeVar("T")


class Codec(abc.ABC, Generic[T]):
    """Abstract Base Class for an encode/decode pair over values of type ``T``."""

    @abc.abstractmethod
    def encode(self, value: T) -> bytes:
        """Serializes a value.

        Raises:
            EntryEncodeError: If the value cannot be serialized.
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes) -> T:
        """Deserializes a value.

        Raises:
            EntryDecodeError: If the data is malformed or of the wrong shape.
        """
        pass
