"""File-backed implementation of the AnyCacheInterface.

Each cache is bound to a namespace directory ``<cache-root>/<cache_name>``
and stores every entry as one file named after its key, holding the
codec's encoding of the value. There is no index or manifest: the
directory listing is the index.

Every operation comes in two forms:

- ``try_*`` methods return a ``CacheResult`` carrying either the value or
  the ``CacheError`` that prevented it.
- The plain interface methods wrap them, log failures, and read any failure
  as absence (None / False / no-op). They never raise.

Writes are not atomic and nothing is locked. Callers sharing a namespace
across threads or processes must serialize access themselves.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, TypeVar

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
from anycache.domain.models.common import CacheKey, CacheName, CacheResult, NamespaceState
from anycache.infrastructure.cache.codecs import JsonCodec
from anycache.infrastructure.cache.paths import resolve_cache_root

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESERVED_KEYS = {"", ".", ".."}
_FORBIDDEN_KEY_CHARS = {c for c in ("/", "\x00", os.sep, os.altsep) if c}


class AnyCache(AnyCacheInterface[T]):
    """Generic cache persisting values of one type under a named directory."""

    def __init__(
        self,
        cache_name: CacheName,
        codec: Optional[Codec[T]] = None,
        cache_root: Optional[Path] = None,
    ):
        """Initializes the cache and eagerly creates its namespace directory.

        Construction never raises. If the cache root cannot be resolved or the
        directory cannot be created, the cache is kept but marked unusable and
        every later operation is a no-op.

        Args:
            cache_name: Namespace of this cache; one directory under the cache root.
            codec: Serializer for values (plain JSON if None).
            cache_root: Directory holding all namespaces. Falls back to the
                ``cache.root`` setting, then the platform cache directory.
        """
        self._cache_name = cache_name
        self._codec: Codec[T] = codec or JsonCodec()
        self._state = self._setup_namespace(cache_root)

    def _setup_namespace(self, cache_root: Optional[Path]) -> NamespaceState:
        """Resolves and creates the namespace directory."""
        root = resolve_cache_root(cache_root)
        if root is None:
            logger.error(f"Cache directory is unavailable, '{self._cache_name}' cache disabled.")
            return NamespaceState.unusable("cache root could not be resolved")

        directory = root / self._cache_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create '{self._cache_name}' cache directory {directory}: {e}")
            return NamespaceState.unusable(str(e), directory)

        logger.debug(f"Cache '{self._cache_name}' initialized at {directory}")
        return NamespaceState.usable(directory)

    # --- Properties ---

    @property
    def cache_name(self) -> CacheName:
        return self._cache_name

    @property
    def directory(self) -> Optional[Path]:
        """Namespace directory, or None if the root could not be resolved."""
        return self._state.directory

    @property
    def is_usable(self) -> bool:
        return self._state.is_usable

    # --- Helpers ---

    def _context(self, key: Optional[str] = None, path: Optional[Path] = None) -> Dict[str, str]:
        context = {"cache_name": self._cache_name}
        if key is not None:
            context["key"] = key
        if path is not None:
            context["path"] = str(path)
        return context

    def _require_directory(self) -> Path:
        """Returns the namespace directory or raises if the namespace is unusable."""
        if not self._state.is_usable:
            raise CacheUnavailableError(
                f"Cache '{self._cache_name}' is unusable: {self._state.reason}",
                self._context(),
            )
        return self._state.directory

    def _entry_path(self, key: CacheKey) -> Path:
        """Maps a key to its file, rejecting keys that would leave the namespace."""
        directory = self._require_directory()
        if key in _RESERVED_KEYS or any(c in key for c in _FORBIDDEN_KEY_CHARS):
            raise InvalidKeyError(f"Invalid cache key: {key!r}", self._context(key))
        return directory / key

    def _list_paths(self) -> List[Path]:
        directory = self._require_directory()
        try:
            return list(directory.iterdir())
        except OSError as e:
            raise CacheIOError(f"Cannot list cache directory: {e}", self._context(path=directory)) from e

    def _read(self, key: CacheKey, path: Path) -> T:
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise EntryNotFoundError(f"No cached value for '{key}'", self._context(key, path)) from e
        except OSError as e:
            raise CacheIOError(f"Cannot read cached value: {e}", self._context(key, path)) from e
        return self._decode(key, data)

    def _encode(self, key: CacheKey, value: T) -> bytes:
        """Runs the codec, reporting any failure it raises as EntryEncodeError."""
        try:
            return self._codec.encode(value)
        except CacheError:
            raise
        except Exception as e:
            raise EntryEncodeError(f"Cannot encode value: {e!r}", self._context(key)) from e

    def _decode(self, key: CacheKey, data: bytes) -> T:
        """Runs the codec, reporting any failure it raises as EntryDecodeError."""
        try:
            return self._codec.decode(data)
        except CacheError:
            raise
        except Exception as e:
            raise EntryDecodeError(f"Cannot decode cached value: {e!r}", self._context(key)) from e

    # --- Explicit Result API ---

    def try_set_entry(self, value: T, key: CacheKey) -> CacheResult[None]:
        """Stores a value, reporting why it failed if it was not persisted."""
        try:
            path = self._entry_path(key)
            data = self._encode(key, value)
            try:
                path.write_bytes(data)
            except OSError as e:
                raise CacheIOError(f"Cannot write cached value: {e}", self._context(key, path)) from e
        except CacheError as e:
            return CacheResult.failure(e)
        logger.debug(f"Stored '{key}' in cache '{self._cache_name}' ({len(data)} bytes)")
        return CacheResult.success()

    def try_get_entry(self, key: CacheKey) -> CacheResult[T]:
        """Reads a value; the error tells a miss apart from a broken entry."""
        try:
            path = self._entry_path(key)
            return CacheResult.success(self._read(key, path))
        except CacheError as e:
            return CacheResult.failure(e)

    def try_get_all_entries(self) -> CacheResult[List[T]]:
        """Reads every entry. The first unreadable entry fails the whole call."""
        try:
            entries = [self._read(CacheKey(path.name), path) for path in self._list_paths()]
        except CacheError as e:
            return CacheResult.failure(e)
        return CacheResult.success(entries)

    def try_remove_entry(self, key: CacheKey) -> CacheResult[None]:
        """Deletes an entry. A missing entry counts as success."""
        try:
            path = self._entry_path(key)
            try:
                path.unlink()
            except FileNotFoundError:
                logger.debug(f"No cached value for '{key}' to remove in cache '{self._cache_name}'")
            except OSError as e:
                raise CacheIOError(f"Cannot remove cached value: {e}", self._context(key, path)) from e
        except CacheError as e:
            return CacheResult.failure(e)
        return CacheResult.success()

    def try_remove_all_entries(self) -> CacheResult[None]:
        """Deletes every entry, stopping at the first failure.

        Entries deleted before the failure stay deleted.
        """
        try:
            for path in self._list_paths():
                try:
                    path.unlink()
                except OSError as e:
                    raise CacheIOError(
                        f"Cannot remove cached value: {e}", self._context(path.name, path)
                    ) from e
        except CacheError as e:
            return CacheResult.failure(e)
        logger.debug(f"Cleared cache '{self._cache_name}'")
        return CacheResult.success()

    def get_entry_results(self) -> Optional[Dict[str, CacheResult[T]]]:
        """Reads every entry independently, keyed by entry key.

        Unlike get_all_entries, one broken entry does not hide the others.

        Returns:
            A mapping of key to result, or None if the namespace is unusable
            or cannot be listed.
        """
        try:
            paths = self._list_paths()
        except CacheError as e:
            logger.warning(f"Error fetching all cached values: {e}")
            return None

        results: Dict[str, CacheResult[T]] = {}
        for path in paths:
            try:
                results[path.name] = CacheResult.success(self._read(CacheKey(path.name), path))
            except CacheError as e:
                results[path.name] = CacheResult.failure(e)
        return results

    def list_keys(self) -> List[CacheKey]:
        """Keys of all stored entries (empty if the namespace is unusable)."""
        try:
            return [CacheKey(path.name) for path in self._list_paths()]
        except CacheError as e:
            logger.warning(f"Error listing cached keys: {e}")
            return []

    # --- AnyCacheInterface Implementation ---

    def set_entry(self, value: T, key: CacheKey) -> None:
        result = self.try_set_entry(value, key)
        if not result.ok:
            logger.warning(f"Error caching value: {result.error}")

    def get_entry(self, key: CacheKey) -> Optional[T]:
        result = self.try_get_entry(key)
        if isinstance(result.error, EntryNotFoundError):
            logger.debug(f"Cache miss for key '{key}' in cache '{self._cache_name}'")
        elif not result.ok:
            logger.warning(f"Error fetching cached value: {result.error}")
        return result.unwrap_or(None)

    def get_all_entries(self) -> Optional[List[T]]:
        result = self.try_get_all_entries()
        if not result.ok:
            logger.warning(f"Error fetching all cached values: {result.error}")
        return result.unwrap_or(None)

    def remove_entry(self, key: CacheKey) -> None:
        result = self.try_remove_entry(key)
        if not result.ok:
            logger.warning(f"Error removing cached value: {result.error}")

    def remove_all_entries(self) -> None:
        result = self.try_remove_all_entries()
        if not result.ok:
            logger.warning(f"Error removing all cached values: {result.error}")

    def entry_exists(self, key: CacheKey) -> bool:
        """Plain existence check; does not validate that the entry is decodable."""
        try:
            return self._entry_path(key).exists()
        except (CacheError, OSError) as e:
            logger.debug(f"Entry existence check failed: {e}")
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cache_name={self._cache_name!r}, directory={self.directory!s})"
