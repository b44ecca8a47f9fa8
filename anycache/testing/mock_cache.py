"""In-memory AnyCacheInterface double for tests.

Keeps entries in a dict for the lifetime of the instance and counts calls
to every operation so tests can assert how calling code used the cache.
"""

from typing import Dict, List, Optional, TypeVar

from anycache.domain.interfaces.cache import AnyCacheInterface
from anycache.domain.models.common import CacheKey

T = TypeVar("T")


class AnyCacheMock(AnyCacheInterface[T]):
    """Dict-backed cache that records per-operation call counts."""

    def __init__(self) -> None:
        self._cache: Dict[CacheKey, T] = {}
        self.reset_call_counts()

    def reset_call_counts(self) -> None:
        self.set_entry_call_count = 0
        self.get_entry_call_count = 0
        self.get_all_entries_call_count = 0
        self.remove_entry_call_count = 0
        self.remove_all_entries_call_count = 0
        self.entry_exists_call_count = 0

    def set_entry(self, value: T, key: CacheKey) -> None:
        self.set_entry_call_count += 1
        self._cache[key] = value

    def get_entry(self, key: CacheKey) -> Optional[T]:
        self.get_entry_call_count += 1
        return self._cache.get(key)

    def get_all_entries(self) -> Optional[List[T]]:
        self.get_all_entries_call_count += 1
        return list(self._cache.values())

    def remove_entry(self, key: CacheKey) -> None:
        self.remove_entry_call_count += 1
        self._cache.pop(key, None)

    def remove_all_entries(self) -> None:
        self.remove_all_entries_call_count += 1
        self._cache.clear()

    def entry_exists(self, key: CacheKey) -> bool:
        self.entry_exists_call_count += 1
        return key in self._cache
