"""
Main FastAPI application.

This file wires together all layers:
- Domain: Catalog entities and errors
- Search: Relevance ranking engine
- Repositories: Catalog loading
- Services: Search orchestration and caching
- Routers: HTTP endpoints
"""

import logging
import time
import traceback
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import metrics
from .cache.memory_cache import SearchResultCache
from .config import settings
from .dependencies import set_catalog_service
from .domain.exceptions import (
    CatalogLoadException,
    CatalogSearchException,
    ProductNotFoundException,
    ValidationException,
)
from .repositories.catalog_repository import ICatalogRepository, JsonCatalogRepository
from .routers import health_router, search_router
from .services.catalog_service import CatalogSearchService


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and structured logging."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(settings.LOG_LEVEL)

logger = structlog.get_logger(__name__)

def create_catalog_service(repository: ICatalogRepository) -> CatalogSearchService:
    """
    Create and configure the catalog search service.

    Args:
        repository: Loaded catalog repository

    Returns:
        Configured CatalogSearchService instance
    """
    cache = SearchResultCache(
        max_size=settings.SEARCH_CACHE_SIZE, ttl_seconds=settings.SEARCH_CACHE_TTL_SECONDS
    )
    return CatalogSearchService(
        repository=repository,
        cache=cache,
        max_query_length=settings.SEARCH_MAX_QUERY_LENGTH,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting catalog search service", catalog_path=settings.CATALOG_PATH)

    repository = JsonCatalogRepository(settings.CATALOG_PATH)
    try:
        repository.load()
    except CatalogLoadException as e:
        logger.error("Failed to load catalog", error=e.message, **e.details)
        raise

    set_catalog_service(create_catalog_service(repository))
    metrics.catalog_items.set(len(repository.list_items()))

    logger.info("Catalog search service started", items=len(repository.list_items()))

    yield

    logger.info("Shutting down catalog search service")
    set_catalog_service(None)


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Relevance-ranked product search for the storefront catalog",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)


# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID for request tracing."""
    request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


# Metrics middleware
@app.middleware("http")
async def track_metrics(request: Request, call_next):
    """Track Prometheus metrics."""
    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time
    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    metrics.http_requests_total.labels(
        method=request.method, endpoint=endpoint, status=response.status_code
    ).inc()
    metrics.http_request_duration_seconds.labels(
        method=request.method, endpoint=endpoint
    ).observe(duration)

    return response


# Include routers
app.include_router(search_router.router)
app.include_router(health_router.router)


# Prometheus metrics endpoint
@app.get("/metrics")
async def prometheus_metrics():
    """Prometheus metrics endpoint."""
    return metrics.metrics_response()


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "status": "operational",
        "docs": "/api/docs",
        "search": "/api/v1/products/search",
        "health": "/api/v1/health",
        "ready": "/api/v1/ready",
    }


_DOMAIN_STATUS = {
    ProductNotFoundException: status.HTTP_404_NOT_FOUND,
    ValidationException: status.HTTP_400_BAD_REQUEST,
    CatalogLoadException: status.HTTP_503_SERVICE_UNAVAILABLE,
}

_DOMAIN_ERROR_CODES = {
    ProductNotFoundException: "not_found",
    ValidationException: "validation_error",
    CatalogLoadException: "catalog_unavailable",
}


@app.exception_handler(CatalogSearchException)
async def domain_exception_handler(request: Request, exc: CatalogSearchException):
    """Map domain exceptions to JSON error responses."""
    status_code = _DOMAIN_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(
        "Request failed",
        path=request.url.path,
        status=status_code,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": _DOMAIN_ERROR_CODES.get(type(exc), "internal_error"),
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Report unmatched routes with the requested path."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"Not Found - {request.url.path}"},
        )
    return await http_exception_handler(request, exc)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    content = {
        "success": False,
        "error": "internal_server_error",
        "message": "An unexpected error occurred",
        "request_id": request.headers.get("X-Request-ID"),
    }
    if settings.DEBUG:
        content["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_search.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
