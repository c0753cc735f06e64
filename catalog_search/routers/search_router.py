"""
Product search router.

Endpoints for relevance-ranked catalog search, ranking inspection,
category listing and product lookup.
"""

import time
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from ..config import settings
from ..dependencies import get_catalog_service
from ..domain.exceptions import ValidationException
from ..metrics import track_search
from ..services.catalog_service import CatalogSearchService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/products", tags=["products"])


class ProductResult(BaseModel):
    """Product in a search response."""

    id: str = Field(..., description="Product id")
    name: str
    category: str
    description: str
    brand: str = ""
    image: str = ""
    price: float = Field(..., description="Unit price")
    count_in_stock: int
    in_stock: bool
    rating: float = 0.0
    num_reviews: int = 0


class SearchResponse(BaseModel):
    """Search response."""

    success: bool = True
    query: str = Field(..., description="Original query")
    category: Optional[str] = Field(None, description="Applied category filter")
    results: List[ProductResult] = Field(default_factory=list)
    count: int = Field(..., description="Number of results")
    latency_ms: float = Field(..., description="Search latency in milliseconds")


class ExplainedMatch(BaseModel):
    """A product with its relevance score."""

    id: str
    name: str
    category: str
    score: int
    position: int = Field(..., description="Position in catalog order")


class ExplainResponse(BaseModel):
    """Ranking inspection response."""

    success: bool = True
    query: str
    matches: List[ExplainedMatch] = Field(default_factory=list)


def _validation_error(e: ValidationException) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "success": False,
            "error": "validation_error",
            "message": e.message,
            "details": e.details,
        },
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={
        200: {"description": "Search successful"},
        400: {"description": "Invalid query"},
    },
    summary="Search products",
    description="""
    Relevance-ranked product search.

    - Blank query returns the whole catalog in catalog order
    - Typo tolerant for words longer than three letters
    - Intent aware: "energy", "snack", "dry skin", "joint pain" ...
    - Optional category filter applied to the ranked results
    """,
)
def search_products(
    q: str = Query(
        default="",
        max_length=settings.SEARCH_MAX_QUERY_LENGTH,
        description="Free-text search query",
        examples=["shilajit", "good for dry skin", "healthy snack"],
    ),
    category: Optional[str] = Query(
        default=None, description='Category filter ("All" for no filter)'
    ),
    limit: int = Query(
        default=settings.SEARCH_DEFAULT_LIMIT,
        ge=1,
        le=settings.SEARCH_MAX_LIMIT,
        description="Maximum results",
    ),
    service: CatalogSearchService = Depends(get_catalog_service),
):
    """Search the catalog, most relevant products first."""
    start_time = time.time()

    try:
        items = service.search(query=q, category=category, limit=limit)
    except ValidationException as e:
        track_search(bool(category), "invalid", time.time() - start_time, 0)
        logger.warning("Invalid search request", query=q, error=e.message)
        raise _validation_error(e)

    duration = time.time() - start_time
    latency_ms = duration * 1000
    track_search(bool(category), "success", duration, len(items))

    logger.info(
        "Product search completed",
        query=q,
        category=category,
        results=len(items),
        latency_ms=round(latency_ms, 2),
    )

    return SearchResponse(
        query=q,
        category=category,
        results=[ProductResult(**item.to_dict()) for item in items],
        count=len(items),
        latency_ms=round(latency_ms, 2),
    )


@router.get(
    "/search/explain",
    response_model=ExplainResponse,
    summary="Inspect ranking",
    description="Score every product for a query, including non-matching ones.",
)
def explain_search(
    q: str = Query(default="", max_length=settings.SEARCH_MAX_QUERY_LENGTH),
    service: CatalogSearchService = Depends(get_catalog_service),
):
    """Show the relevance score behind each product's position."""
    matches = service.explain(q)
    return ExplainResponse(
        query=q,
        matches=[ExplainedMatch(**m.to_dict(include_item=False)) for m in matches],
    )


@router.get(
    "/categories",
    response_model=List[str],
    summary="List categories",
)
def list_categories(service: CatalogSearchService = Depends(get_catalog_service)):
    """Category names for the shop filter, starting with "All"."""
    return service.list_categories()


@router.get(
    "/{product_id}",
    response_model=ProductResult,
    responses={404: {"description": "Product not found"}},
    summary="Get product",
)
def get_product(product_id: str, service: CatalogSearchService = Depends(get_catalog_service)):
    """Look up a single product by id."""
    return ProductResult(**service.get_product(product_id).to_dict())
