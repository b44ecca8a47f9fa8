"""anycache: generic on-disk key-value cache.

Each cache is bound to a value type and a namespace and stores one file per
entry under ``<platform cache dir>/<cache name>/<key>``.
"""

from anycache.domain.errors import (
    CacheError,
    CacheIOError,
    CacheUnavailableError,
    EntryDecodeError,
    EntryEncodeError,
    EntryNotFoundError,
    InvalidKeyError,
)
from anycache.domain.interfaces.cache import AnyCacheInterface
from anycache.domain.interfaces.codec import Codec
from anycache.domain.models.common import CacheKey, CacheName, CacheResult, NamespaceState, NamespaceStatus
from anycache.infrastructure.cache.codecs import JsonCodec
from anycache.infrastructure.cache.file_cache import AnyCache

__version__ = "1.0.0"

__all__ = [
    "AnyCache",
    "AnyCacheInterface",
    "CacheError",
    "CacheIOError",
    "CacheKey",
    "CacheName",
    "CacheResult",
    "CacheUnavailableError",
    "Codec",
    "EntryDecodeError",
    "EntryEncodeError",
    "EntryNotFoundError",
    "InvalidKeyError",
    "JsonCodec",
    "NamespaceState",
    "NamespaceStatus",
]
