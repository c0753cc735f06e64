"""
Request-scoped access to the catalog search service.

The service is built once the catalog file has loaded, so routers reach it
through ``Depends(get_catalog_service)`` instead of importing it directly.
Tests swap it out with ``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .services.catalog_service import CatalogSearchService

# Installed by the app lifespan after the catalog loads
_catalog_service: Optional["CatalogSearchService"] = None


def set_catalog_service(service: Optional["CatalogSearchService"]) -> None:
    """
    Install the service that answers product searches.

    Pass None on shutdown so readiness reports the catalog as unavailable.
    """
    global _catalog_service
    _catalog_service = service


def get_catalog_service() -> "CatalogSearchService":
    """
    Return the installed catalog search service.

    Raises:
        RuntimeError: If the catalog has not been loaded yet
    """
    if _catalog_service is None:
        raise RuntimeError("Catalog not loaded; search service unavailable")
    return _catalog_service
