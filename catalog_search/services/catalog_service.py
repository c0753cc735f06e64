"""
Business logic service layer.

Orchestrates catalog search: runs the relevance engine over the current
catalog snapshot, narrows results by category and memoizes rankings.
"""

import logging
import time
from typing import List, Optional

from ..cache.memory_cache import SearchResultCache
from ..domain.entities import CatalogItem, SearchMatch
from ..domain.exceptions import ProductNotFoundException, ValidationException
from ..repositories.catalog_repository import ICatalogRepository
from ..search.relevance_scorer import RelevanceScorer
from ..search.tokenizer import normalize_query

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


class CatalogSearchService:
    """
    Catalog search service with result caching.

    Search flow:
    1. Check the result cache for (catalog version, query, category)
    2. Rank the catalog snapshot with the relevance scorer
    3. Keep only the requested category
    4. Cache and return the ranked items
    """

    def __init__(
        self,
        repository: ICatalogRepository,
        scorer: Optional[RelevanceScorer] = None,
        cache: Optional[SearchResultCache] = None,
        max_query_length: int = 200,
    ):
        """
        Initialize search service.

        Args:
            repository: Catalog source
            scorer: Relevance scorer (default configuration if omitted)
            cache: Result cache; caching is disabled if None
            max_query_length: Longest accepted query
        """
        self.repository = repository
        self.scorer = scorer or RelevanceScorer()
        self.cache = cache
        self.max_query_length = max_query_length

    def search(
        self,
        query: str = "",
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[CatalogItem]:
        """
        Search the catalog.

        Args:
            query: Free-text query; blank returns the catalog in catalog order
            category: Exact category name (case-insensitive); "All" or None
                disables the filter
            limit: Maximum number of results

        Returns:
            Ranked catalog items

        Raises:
            ValidationException: If the query is too long or limit < 1
        """
        start_time = time.time()
        query = query or ""

        if len(query) > self.max_query_length:
            raise ValidationException(
                "query", query[:20] + "...", f"Query exceeds {self.max_query_length} characters"
            )
        if limit is not None and limit < 1:
            raise ValidationException("limit", limit, "Limit must be at least 1")

        category = self._normalize_category(category)
        key = SearchResultCache.make_key(
            self.repository.version, normalize_query(query), category
        )

        results = self.cache.get(key) if self.cache else None
        if results is None:
            items = self.repository.list_items()
            ranked = self.scorer.rank(items, query)
            if category:
                ranked = [item for item in ranked if item.category.lower() == category]
            results = tuple(ranked)
            if self.cache:
                self.cache.set(key, results)

        latency_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Search {query!r} (category={category or ALL_CATEGORIES}): "
            f"{len(results)} results in {latency_ms:.2f}ms"
        )

        if limit is not None:
            return list(results[:limit])
        return list(results)

    def explain(self, query: str) -> List[SearchMatch]:
        """
        Score every catalog item for a query, highest score first.

        Unlike search, zero-score items are included so the ranking can be
        inspected in full.
        """
        matches = self.scorer.score_items(self.repository.list_items(), query)
        matches.sort(key=lambda m: m.sort_key)
        return matches

    def get_product(self, product_id: str) -> CatalogItem:
        """
        Get a single product.

        Raises:
            ProductNotFoundException: If the id is unknown
        """
        item = self.repository.find_by_id(product_id)
        if item is None:
            raise ProductNotFoundException(product_id)
        return item

    def list_categories(self) -> List[str]:
        """
        List category names for filtering.

        Returns:
            "All" followed by each distinct category in catalog order
        """
        categories = [ALL_CATEGORIES]
        seen = set()
        for item in self.repository.list_items():
            if item.category and item.category not in seen:
                seen.add(item.category)
                categories.append(item.category)
        return categories

    def get_statistics(self) -> dict:
        """
        Get service statistics.

        Returns:
            Dictionary with catalog, cache and scorer details
        """
        return {
            "catalog": {
                "items": len(self.repository.list_items()),
                "version": self.repository.version,
            },
            "cache": self.cache.get_stats() if self.cache else None,
            "scorer": self.scorer.get_stats(),
        }

    def _normalize_category(self, category: Optional[str]) -> Optional[str]:
        if not category or not category.strip():
            return None
        category = category.strip()
        if category.lower() == ALL_CATEGORIES.lower():
            return None
        return category.lower()
