"""Interface for key-value caches bound to a value type and a namespace.

Defines the contract every cache implementation exposes: storing,
retrieving, listing, removing, and checking entries. Implementations
never raise to the caller from these methods; failures read as absence.
"""

import abc
from typing import Generic, List, Optional, TypeVar

from ..models.common import CacheKey

T = TypeVar("T")


class AnyCacheInterface(abc.ABC, Generic[T]):
    """Abstract Base Class for a cache holding values of type ``T``."""

    @abc.abstractmethod
    def set_entry(self, value: T, key: CacheKey) -> None:
        """Adds a new entry to the cache, replacing any existing entry for the key.

        Args:
            value: The cached value.
            key: The key under which the entry is saved.
        """
        pass

    @abc.abstractmethod
    def get_entry(self, key: CacheKey) -> Optional[T]:
        """Gets the entry stored for a key.

        Args:
            key: The key to look up.

        Returns:
            The stored value, or None if absent or unreadable.
        """
        pass

    @abc.abstractmethod
    def get_all_entries(self) -> Optional[List[T]]:
        """Gets every entry in the cache, in no particular order.

        Returns:
            A list of values (empty if the cache holds nothing), or None if
            the cache cannot be read.
        """
        pass

    @abc.abstractmethod
    def remove_entry(self, key: CacheKey) -> None:
        """Removes the entry for a key. Does nothing if there is none."""
        pass

    @abc.abstractmethod
    def remove_all_entries(self) -> None:
        """Removes every entry in the cache."""
        pass

    @abc.abstractmethod
    def entry_exists(self, key: CacheKey) -> bool:
        """Checks whether an entry is currently stored for a key."""
        pass
