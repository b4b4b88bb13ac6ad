"""Simple in-memory TTL cache for weather records."""

import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from weather_lambda.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 300  # 5 minutes
DEFAULT_SWEEP_INTERVAL_SECONDS = 600  # 10 minutes


class CacheEntry(Generic[T]):
    """A cached value with creation and expiration time."""

    def __init__(self, value: T, created_at: float, ttl_seconds: float):
        self.value = value
        self.created_at = created_at
        self.expires_at = created_at + ttl_seconds

    def is_expired(self, now: float) -> bool:
        """Check if cache entry has expired at ``now``."""
        return now >= self.expires_at


class TTLCache(Generic[T]):
    """In-memory cache with a fixed TTL and a lazy periodic sweep.

    Concurrent invocations in one warm process share this instance, so all
    operations hold a single ``threading.Lock``. Expired entries are purged
    on the first ``get``/``set`` after each sweep interval elapses.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._cache: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get(self, key: str) -> T | None:
        """Get cached value if not expired.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found/expired
        """
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)

            entry = self._cache.get(key)
            if entry and not entry.is_expired(now):
                log_with_context(
                    logger,
                    "info",
                    "Cache hit",
                    cache_key=key,
                    event_type="cache_hit",
                )
                return entry.value

            # Remove expired entry
            if entry:
                del self._cache[key]
                log_with_context(
                    logger,
                    "debug",
                    "Cache expired",
                    cache_key=key,
                    event_type="cache_expired",
                )

            log_with_context(
                logger,
                "info",
                "Cache miss",
                cache_key=key,
                event_type="cache_miss",
            )
            return None

    def set(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``, replacing any previous entry.

        Args:
            key: Cache key
            value: Value to cache
        """
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            self._cache[key] = CacheEntry(value, now, self.ttl_seconds)
            log_with_context(
                logger,
                "info",
                "Cache set",
                cache_key=key,
                ttl_seconds=self.ttl_seconds,
                event_type="cache_set",
            )

    def clear(self, key: str | None = None) -> None:
        """Clear cache entry or entire cache.

        Args:
            key: Specific key to clear, or None to clear all
        """
        with self._lock:
            if key:
                self._cache.pop(key, None)
            else:
                self._cache.clear()
            log_with_context(
                logger,
                "debug",
                "Cache cleared",
                cache_key=key,
                event_type="cache_clear",
            )

    def cleanup_expired(self) -> int:
        """Remove all expired entries from cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            self._last_sweep = now
            return self._remove_expired(now)

    def _maybe_sweep(self, now: float) -> None:
        # Caller holds the lock
        if now - self._last_sweep >= self.sweep_interval_seconds:
            self._last_sweep = now
            self._remove_expired(now)

    def _remove_expired(self, now: float) -> int:
        expired_keys = [key for key, entry in self._cache.items() if entry.is_expired(now)]
        for key in expired_keys:
            del self._cache[key]

        if expired_keys:
            log_with_context(
                logger,
                "debug",
                "Cleaned up expired cache entries",
                count=len(expired_keys),
                event_type="cache_cleanup",
            )
        return len(expired_keys)
