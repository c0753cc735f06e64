"""Cache module initialization."""

from .memory_cache import SearchResultCache

__all__ = ["SearchResultCache"]
