"""Test doubles for code that depends on AnyCacheInterface."""

from anycache.testing.mock_cache import AnyCacheMock

__all__ = ["AnyCacheMock"]
