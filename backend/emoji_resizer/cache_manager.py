"""
Emoji Result Cache

In-memory cache for final output bytes with:
- Maximum entry count with LRU eviction
- TTL counted from insertion (reads never extend it)
- Thread-safe operations with Lock
"""

import time
import logging
from threading import Lock
from typing import Any, Callable, Dict, Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Bounded, time-expiring store mapping emoji identifier -> output bytes.

    Storage, expiry and eviction are delegated to cachetools.TTLCache;
    this class only adds locking, logging and stats.
    """

    def __init__(
        self,
        max_entries: int = 50_000,
        ttl_seconds: float = 24 * 60 * 60,  # 24 hours
        timer: Callable[[], float] = time.monotonic,
    ):
        self._store: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)
        self._lock = Lock()
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._hits = 0
        self._misses = 0

    def get(self, identifier: str) -> Optional[bytes]:
        """
        Get cached output bytes.

        Returns:
            The bytes if present and not expired, None otherwise.
        """
        with self._lock:
            data = self._store.get(identifier)
            if data is None:
                self._misses += 1
            else:
                self._hits += 1
            return data

    def put(self, identifier: str, data: bytes) -> None:
        """Store output bytes, replacing any previous entry and restarting its TTL."""
        with self._lock:
            # Re-insert so the TTL restarts from now
            self._store.pop(identifier, None)
            self._store[identifier] = data
        logger.debug(f"[EmojiCache] Cached: {identifier} ({len(data)} bytes)")

    def __len__(self) -> int:
        with self._lock:
            self._store.expire()
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            self._store.expire()
            total_size = sum(len(v) for v in self._store.values())
            return {
                "total_entries": len(self._store),
                "max_entries": self._max_entries,
                "total_size_bytes": total_size,
                "total_size_mb": round(total_size / (1024 * 1024), 2),
                "ttl_hours": self._ttl_seconds / 3600,
                "hits": self._hits,
                "misses": self._misses,
            }
