"""In-memory response cache with per-entry expiry."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog

logger = structlog.get_logger()

DEFAULT_TTL_SECONDS = 120.0


@dataclass
class CacheEntry:
    """A cached payload and the clock reading at which it goes stale."""

    key: str
    data: Any
    expires_at: float


class CacheStore:
    """Key/value store whose entries expire after a fixed TTL.

    Eviction is lazy: a stale entry is dropped the next time it is read.
    There is no capacity bound.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of each entry after it is set
            clock: Monotonic clock in seconds, injectable for tests
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is not None and self._clock() < entry.expires_at:
            return entry.data

        if entry is not None:
            logger.debug("Cache entry expired", key=key)
        self._entries.pop(key, None)
        return None

    def set(self, key: str, data: Any) -> None:
        """Store a value, replacing any previous entry and resetting its expiry."""
        self._entries[key] = CacheEntry(
            key=key,
            data=data,
            expires_at=self._clock() + self.ttl_seconds,
        )

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
