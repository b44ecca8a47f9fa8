"""Resolves where cache namespaces live on disk."""

import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_cache_dir

from anycache.infrastructure.config.settings import get_cache_root

logger = logging.getLogger(__name__)

APP_NAME = "anycache"


def resolve_cache_root(override: Optional[Path] = None) -> Optional[Path]:
    """Returns the directory that holds all cache namespaces.

    Order: explicit override, ``cache.root`` setting, platform user cache dir.
    Returns None if none of them can be determined.
    """
    if override is not None:
        return Path(override)

    configured = get_cache_root()
    if configured is not None:
        return configured

    try:
        return Path(user_cache_dir(APP_NAME, appauthor=False))
    except (KeyError, OSError, RuntimeError) as e:
        # No home directory / platform location available
        logger.error(f"Cannot resolve platform cache directory: {e}")
        return None
