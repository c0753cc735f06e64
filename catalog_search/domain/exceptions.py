"""
Custom exceptions for the catalog search domain.

These exceptions represent service-level errors and are independent
of infrastructure concerns (HTTP, file system, etc.). The ranking engine
itself is total and never raises them.
"""

from typing import Any, Optional


class CatalogSearchException(Exception):
    """Base exception for all catalog search errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CatalogLoadException(CatalogSearchException):
    """Raised when the product catalog cannot be loaded."""

    def __init__(self, source: str, reason: Optional[str] = None):
        message = f"Catalog could not be loaded from '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"source": source, "reason": reason})


class ProductNotFoundException(CatalogSearchException):
    """Raised when a product id is not present in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            details={"product_id": product_id},
        )


class ValidationException(CatalogSearchException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
