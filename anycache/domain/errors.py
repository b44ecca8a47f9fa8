"""Exception hierarchy for cache operations.

All exceptions inherit from CacheError, which carries optional structured
context (cache name, key, path) for logging. The plain cache API never
raises these; they surface through ``CacheResult.error`` on the ``try_*``
methods, or via ``CacheResult.unwrap()``.
"""

from typing import Any, Dict, Optional


class CacheError(Exception):
    """Base exception for all cache errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class CacheUnavailableError(CacheError):
    """Raised when the namespace directory could not be resolved or created.

    This is permanent for the lifetime of the cache instance.
    """


class InvalidKeyError(CacheError):
    """Raised when a key cannot be mapped to a file inside the namespace directory.

    Examples:
        - Empty key, "." or ".."
        - Key containing a path separator or NUL byte
    """


class EntryNotFoundError(CacheError):
    """Raised when no entry is stored for a key."""


class EntryEncodeError(CacheError):
    """Raised when a value cannot be serialized by the codec."""


class EntryDecodeError(CacheError):
    """Raised when stored bytes cannot be deserialized by the codec."""


class CacheIOError(CacheError):
    """Raised on a filesystem failure (permission denied, read/write/list/delete error)."""
