"""
Tests for domain exceptions.

Simple tests to ensure exceptions work correctly.
"""

from catalog_search.domain.exceptions import (
    CatalogLoadException,
    CatalogSearchException,
    ProductNotFoundException,
    ValidationException,
)


class TestExceptions:
    """Test custom exceptions."""

    def test_validation_exception(self):
        exc = ValidationException("limit", 0, "Limit must be at least 1")
        assert "limit" in str(exc)
        assert "Limit must be at least 1" in str(exc)
        assert exc.details == {"field": "limit", "value": "0", "reason": "Limit must be at least 1"}

    def test_product_not_found_exception(self):
        exc = ProductNotFoundException("42")
        assert "42" in str(exc)
        assert exc.details == {"product_id": "42"}

    def test_catalog_load_exception(self):
        exc = CatalogLoadException("products.json", "file not found")
        assert "products.json" in str(exc)
        assert "file not found" in str(exc)

    def test_catalog_load_exception_without_reason(self):
        exc = CatalogLoadException("products.json")
        assert exc.message == "Catalog could not be loaded from 'products.json'"

    def test_hierarchy(self):
        for exc in (
            ValidationException("q", "", "empty"),
            ProductNotFoundException("1"),
            CatalogLoadException("x"),
        ):
            assert isinstance(exc, CatalogSearchException)

    def test_base_exception_defaults(self):
        exc = CatalogSearchException("boom")
        assert exc.message == "boom"
        assert exc.details == {}
