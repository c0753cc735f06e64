"""
Shared test fixtures.
"""

from decimal import Decimal

import pytest

from catalog_search.domain.entities import CatalogItem
from catalog_search.repositories.catalog_repository import InMemoryCatalogRepository
from catalog_search.services.catalog_service import CatalogSearchService


def make_item(
    item_id: str,
    name: str = "",
    category: str = "",
    description: str = "",
    count_in_stock: int = 10,
) -> CatalogItem:
    """Helper to create catalog items."""
    return CatalogItem(
        id=item_id,
        name=name,
        category=category,
        description=description,
        brand="Skardu Organics",
        price=Decimal("1000"),
        count_in_stock=count_in_stock,
    )


@pytest.fixture
def catalog():
    """Small storefront catalog covering every product category."""
    return [
        make_item(
            "1",
            "Pure Himalayan Shilajit Resin",
            "Shilajit",
            "Authentic Shilajit resin harvested from the high peaks of Gilgit-Baltistan. "
            "Rich in fulvic acid and trace minerals to support energy and stamina.",
        ),
        make_item(
            "2",
            "Shilajit Capsules",
            "Shilajit",
            "Purified Shilajit extract in easy vegetarian capsules for daily vitality.",
        ),
        make_item(
            "3",
            "Cold-Pressed Apricot Oil",
            "Organic Oils",
            "Light, fast-absorbing oil pressed from Hunza apricot kernels. "
            "Nourishes dry skin and adds shine to hair.",
        ),
        make_item(
            "4",
            "Walnut Massage Oil",
            "Organic Oils",
            "Warming walnut oil blend for massage. Helps soothe tired muscles and stiff joints.",
            count_in_stock=0,
        ),
        make_item(
            "5",
            "Sun-Dried Apricots",
            "Dry Fruits",
            "Naturally sweet apricots dried in the mountain sun. A wholesome snack full of fibre.",
        ),
        make_item(
            "6",
            "Almonds",
            "Dry Fruits",
            "Crunchy mountain-grown almonds, raw and unsalted.",
        ),
        make_item(
            "7",
            "Wild Mountain Honey",
            "Natural Foods",
            "Raw honey collected from wildflower meadows. Unfiltered and unheated.",
        ),
        make_item(
            "8",
            "Himalayan Pink Salt",
            "Natural Foods",
            "Hand-mined rock salt with natural minerals for everyday cooking.",
        ),
    ]


@pytest.fixture
def repository(catalog):
    """In-memory repository holding the sample catalog."""
    return InMemoryCatalogRepository(catalog)


@pytest.fixture
def service(repository):
    """Catalog service without result caching."""
    return CatalogSearchService(repository=repository)
