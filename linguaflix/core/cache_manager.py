"""
In-memory corpus cache for Linguaflix.

Holds the segmented candidate sentences of each subtitle file so repeat
requests skip ingestion, cleaning and segmentation.

Features:
- Per-entry time-to-live (24 hours by default)
- Background sweep that evicts expired entries
- Expired entries read as misses even before the sweep runs
- Thread-safe operations and hit/miss statistics
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import logging

from linguaflix import settings

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Represents a cache entry with metadata"""
    key: str
    value: Any
    created_at: float
    last_accessed: float
    access_count: int = 0
    ttl_seconds: Optional[int] = None

    def is_expired(self, now: float) -> bool:
        """Check if cache entry is expired at the given clock reading"""
        if self.ttl_seconds is None:
            return False
        return now >= self.created_at + self.ttl_seconds


class CacheManager:
    """TTL cache with a periodic eviction sweep"""

    def __init__(
        self,
        default_ttl: Optional[int] = None,
        cleanup_interval: Optional[int] = None,
        key_prefix: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
        start_cleanup: bool = True
    ):
        """
        Args:
            default_ttl: Seconds an entry lives (default: from settings, 86400)
            cleanup_interval: Seconds between eviction sweeps (default: 120)
            key_prefix: Prefix for subtitle cache keys
            clock: Monotonic time source in seconds
            start_cleanup: Start the background sweep thread
        """
        self.default_ttl = default_ttl if default_ttl is not None else settings.get_cache_default_ttl()
        self.cleanup_interval = cleanup_interval or settings.get_cache_cleanup_interval()
        self.key_prefix = key_prefix if key_prefix is not None else settings.get_cache_key_prefix()
        self._clock = clock

        # Thread-safe storage
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._stop_event = threading.Event()

        # Statistics
        self._stats = {
            'hits': 0,
            'misses': 0,
            'evictions': 0
        }

        self._cleanup_thread: Optional[threading.Thread] = None
        if start_cleanup:
            self._cleanup_thread = threading.Thread(
                target=self._cleanup_worker,
                name="linguaflix-cache-sweep",
                daemon=True
            )
            self._cleanup_thread.start()

        logger.info(f"CacheManager initialized: ttl={self.default_ttl}s, sweep every {self.cleanup_interval}s")

    def _cleanup_worker(self):
        """Background cleanup worker"""
        while not self._stop_event.wait(self.cleanup_interval):
            try:
                self.cleanup_expired()
            except Exception as e:
                logger.error(f"Cache cleanup error: {e}")

    def cleanup_expired(self) -> int:
        """
        Remove expired entries.

        Returns:
            Number of entries evicted
        """
        now = self._clock()
        with self._lock:
            expired_keys = [
                key for key, entry in self._entries.items()
                if entry.is_expired(now)
            ]

            for key in expired_keys:
                del self._entries[key]
                logger.debug(f"Removed expired cache entry: {key}")

            self._stats['evictions'] += len(expired_keys)
        return len(expired_keys)

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache, or None on a miss"""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)

            if entry is None:
                self._stats['misses'] += 1
                logger.debug(f"Cache miss: {key}")
                return None

            if entry.is_expired(now):
                del self._entries[key]
                self._stats['misses'] += 1
                self._stats['evictions'] += 1
                logger.debug(f"Cache entry expired: {key}")
                return None

            entry.last_accessed = now
            entry.access_count += 1
            self._stats['hits'] += 1

            logger.debug(f"Cache hit: {key}")
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store value, replacing any existing entry for the key"""
        now = self._clock()
        entry = CacheEntry(
            key=key,
            value=value,
            created_at=now,
            last_accessed=now,
            ttl_seconds=self.default_ttl if ttl is None else ttl
        )

        with self._lock:
            self._entries[key] = entry

        logger.debug(f"Cached: {key} (ttl: {entry.ttl_seconds}s)")

    def delete(self, key: str) -> bool:
        """Delete cache entry; returns whether it existed"""
        with self._lock:
            existed = self._entries.pop(key, None) is not None

        logger.debug(f"Deleted cache entry: {key}")
        return existed

    def clear(self) -> None:
        """Clear all cache entries"""
        with self._lock:
            self._entries.clear()

        logger.info("Cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            total_requests = self._stats['hits'] + self._stats['misses']
            hit_rate = (self._stats['hits'] / total_requests * 100) if total_requests > 0 else 0

            return {
                'hits': self._stats['hits'],
                'misses': self._stats['misses'],
                'hit_rate': round(hit_rate, 2),
                'evictions': self._stats['evictions'],
                'entries': len(self._entries)
            }

    def get_subtitle_key(self, file_path: str) -> str:
        """Generate cache key for a subtitle file's candidate sentences"""
        return f"{self.key_prefix}{file_path}"

    def close(self) -> None:
        """Stop the background sweep"""
        self._stop_event.set()
        if self._cleanup_thread is not None:
            self._cleanup_thread.join(timeout=1.0)
            self._cleanup_thread = None
