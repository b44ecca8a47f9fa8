"""Defines common Value Objects used across the cache domain.

These objects represent simple values like cache names and keys, the
resolved state of a namespace directory, and the result wrapper returned
by the explicit (non-swallowing) cache API.
"""

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, NewType, Optional, TypeVar

from anycache.domain.errors import CacheError

T = TypeVar("T")

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
CacheName = NewType("CacheName", str)  # Namespace of a cache, maps to one directory
CacheKey = NewType("CacheKey", str)    # Key of a single entry, maps to one file

# === Namespace State ===

class NamespaceStatus(enum.Enum):
    """Whether a namespace's backing directory could be resolved and created."""
    USABLE = "usable"
    UNUSABLE = "unusable"


@dataclass(frozen=True)
class NamespaceState:
    """Namespace directory state, captured once when a cache is constructed."""
    status: NamespaceStatus
    directory: Optional[Path] = None
    reason: Optional[str] = None  # Why the namespace is unusable

    @classmethod
    def usable(cls, directory: Path) -> "NamespaceState":
        return cls(status=NamespaceStatus.USABLE, directory=directory)

    @classmethod
    def unusable(cls, reason: str, directory: Optional[Path] = None) -> "NamespaceState":
        return cls(status=NamespaceStatus.UNUSABLE, directory=directory, reason=reason)

    @property
    def is_usable(self) -> bool:
        return self.status is NamespaceStatus.USABLE

# === Operation Results ===

@dataclass(frozen=True)
class CacheResult(Generic[T]):
    """Outcome of a cache operation: either a value or the error that prevented it.

    Operations without a meaningful value (set/remove) succeed with ``value=None``.
    """
    value: Optional[T] = None
    error: Optional[CacheError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "CacheResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CacheError) -> "CacheResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Returns the value, raising the stored error if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Optional[T] = None) -> Optional[T]:
        """Returns the value, or ``default`` if the operation failed."""
        return self.value if self.error is None else default
