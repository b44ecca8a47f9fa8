"""Cache Implementations.

Provides the file-backed AnyCache, its JSON codec, and cache root
resolution.
"""
