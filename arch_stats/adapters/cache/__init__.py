"""In-memory cache adapter package."""

from .memory import CacheStore, CacheEntry, DEFAULT_TTL_SECONDS

__all__ = ["CacheStore", "CacheEntry", "DEFAULT_TTL_SECONDS"]
