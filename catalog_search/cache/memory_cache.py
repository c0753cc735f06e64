"""
In-memory TTL cache for ranked search results.

Ranking is a pure function of (catalog, query), so results can be
memoized per catalog version. A catalog reload bumps the version, which
makes every older entry unreachable without an explicit flush.
"""

import logging
import threading
from typing import Dict, Hashable, Optional, Tuple

from cachetools import TTLCache  # type: ignore[import-untyped]

from ..domain.entities import CatalogItem

logger = logging.getLogger(__name__)

CacheKey = Tuple[Hashable, ...]


class SearchResultCache:
    """
    Bounded TTL cache mapping search keys to ranked item tuples.

    cachetools caches are not thread-safe, so every access goes through
    a lock.

    Attributes:
        cache: TTL cache storing ranked results
        max_size: Maximum number of cached queries
        ttl_seconds: Lifetime of an entry in seconds
        hits: Number of cache hits
        misses: Number of cache misses
    """

    def __init__(self, max_size: int = 1000, ttl_seconds: int = 300):
        """
        Initialize result cache.

        Args:
            max_size: Maximum number of cached queries (default: 1000)
            ttl_seconds: Entry lifetime in seconds (default: 300)
        """
        self.cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl_seconds)
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._lock = threading.Lock()

        self.hits = 0
        self.misses = 0

        logger.info(
            f"Initialized SearchResultCache with max_size={max_size}, ttl={ttl_seconds}s"
        )

    @staticmethod
    def make_key(
        catalog_version: int, normalized_query: str, category: Optional[str] = None
    ) -> CacheKey:
        """Build the cache key for a search."""
        return (catalog_version, normalized_query, (category or "").lower())

    def get(self, key: CacheKey) -> Optional[Tuple[CatalogItem, ...]]:
        """
        Get ranked results from cache.

        Args:
            key: Key built with make_key

        Returns:
            Cached item tuple, or None on miss/expiry
        """
        with self._lock:
            results = self.cache.get(key)
            if results is None:
                self.misses += 1
                logger.debug(f"Cache MISS: {key}")
                return None
            self.hits += 1
            logger.debug(f"Cache HIT: {key}")
            return results

    def set(self, key: CacheKey, results: Tuple[CatalogItem, ...]) -> None:
        """
        Store ranked results.

        Args:
            key: Key built with make_key
            results: Ranked items
        """
        with self._lock:
            self.cache[key] = tuple(results)

    def clear(self) -> None:
        """Clear all cached results."""
        with self._lock:
            count = len(self.cache)
            self.cache.clear()
        logger.info(f"Cleared {count} cached searches")

    def get_stats(self) -> Dict[str, int]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        with self._lock:
            size = len(self.cache)
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "size": size,
            "max_size": self.max_size,
            "ttl_seconds": self.ttl_seconds,
            "hits": self.hits,
            "misses": self.misses,
            "total_requests": total_requests,
            "hit_rate_percent": int(round(hit_rate)),
        }
