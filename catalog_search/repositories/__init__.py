"""
Repository layer - Catalog data access.
"""

from .catalog_repository import (
    ICatalogRepository,
    InMemoryCatalogRepository,
    JsonCatalogRepository,
)

__all__ = ["ICatalogRepository", "InMemoryCatalogRepository", "JsonCatalogRepository"]
