"""Snapshot cache for fleet signals."""
import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional

from ...domain.models import FleetSnapshot

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[], Awaitable[FleetSnapshot]]


class SignalCache:
    """
    In-memory holder of the last fetched FleetSnapshot.

    The snapshot itself is immutable; a refresh replaces it in one
    assignment so readers never observe a half-built fleet. Concurrent
    refreshes are coalesced behind a lock. Writers call invalidate() after
    changing an override or flag to force the next read to refetch.
    """

    def __init__(
        self,
        ttl_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize signal cache.

        Args:
            ttl_seconds: Snapshot lifetime in seconds (0 disables reuse)
            clock: Monotonic clock, injectable for tests
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot: Optional[FleetSnapshot] = None
        self._stored_at: Optional[float] = None
        self._generation = 0
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    def _is_fresh(self) -> bool:
        if self._snapshot is None or self._stored_at is None:
            return False
        return self._clock() - self._stored_at < self.ttl_seconds

    def peek(self) -> Optional[FleetSnapshot]:
        """Last stored snapshot regardless of age, without fetching"""
        return self._snapshot

    async def get(self, loader: SnapshotLoader, force_refresh: bool = False) -> FleetSnapshot:
        """
        Return a fresh snapshot, calling `loader` when needed.

        Args:
            loader: Coroutine function that fetches a new snapshot
            force_refresh: Skip the cached snapshot even if still fresh

        Returns:
            Current FleetSnapshot
        """
        if not force_refresh and self._is_fresh():
            self._hits += 1
            return self._snapshot

        async with self._lock:
            # Another caller may have refreshed while we waited
            if not force_refresh and self._is_fresh():
                self._hits += 1
                return self._snapshot

            self._misses += 1
            generation = self._generation
            snapshot = await loader()

            self._snapshot = snapshot
            if generation == self._generation:
                self._stored_at = self._clock()
            else:
                # Invalidated mid-fetch: serve it once, refetch on next read
                self._stored_at = None
                logger.debug("Snapshot invalidated during refresh; marked stale")

            logger.debug(f"Stored fleet snapshot with {len(snapshot)} cameras")
            return snapshot

    def invalidate(self) -> None:
        """Mark the current snapshot stale so the next read refetches."""
        self._generation += 1
        self._stored_at = None
        logger.info("Fleet signal cache invalidated")

    def clear(self) -> None:
        """Drop the snapshot entirely."""
        self._generation += 1
        self._snapshot = None
        self._stored_at = None
        logger.info("Fleet signal cache cleared")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        return {
            "has_snapshot": self._snapshot is not None,
            "is_fresh": self._is_fresh(),
            "camera_count": len(self._snapshot) if self._snapshot is not None else 0,
            "ttl_seconds": self.ttl_seconds,
            "hits": self._hits,
            "misses": self._misses,
        }
