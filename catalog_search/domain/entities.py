"""
Domain entities for the product catalog.

Core business objects representing catalog items and ranked search matches.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class CatalogItem:
    """
    Value object representing a product in the storefront catalog.

    Only ``name``, ``category`` and ``description`` take part in relevance
    scoring. All other attributes pass through search untouched.
    Immutable so that ranking can never alter the caller's catalog.
    """

    id: str
    name: str = ""
    category: str = ""
    description: str = ""
    brand: str = ""
    image: str = ""
    price: Decimal = Decimal("0")
    count_in_stock: int = 0
    rating: float = 0.0
    num_reviews: int = 0

    def __post_init__(self):
        """Validate numeric attributes on creation."""
        if not self.price.is_finite():
            raise ValueError(f"Price must be a finite number: {self.price}")
        if self.price < 0:
            raise ValueError(f"Price cannot be negative: {self.price}")
        if self.count_in_stock < 0:
            raise ValueError(f"Stock count cannot be negative: {self.count_in_stock}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"Rating must be between 0 and 5: {self.rating}")

    @property
    def in_stock(self) -> bool:
        """True if at least one unit is available."""
        return self.count_in_stock > 0

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogItem":
        """
        Build an item from a product record.

        Accepts both the storefront's camelCase record shape
        (``_id``, ``countInStock``, ``numReviews``) and snake_case keys.

        Raises:
            ValueError: If the record has no identifier or invalid numbers
        """
        item_id = data.get("_id", data.get("id"))
        if item_id is None or _as_text(item_id).strip() == "":
            raise ValueError("Product record has no identifier")

        try:
            price = Decimal(str(data.get("price", 0) or 0))
        except InvalidOperation as e:
            raise ValueError(f"Invalid price: {data.get('price')!r}") from e

        return cls(
            id=_as_text(item_id),
            name=_as_text(data.get("name")),
            category=_as_text(data.get("category")),
            description=_as_text(data.get("description")),
            brand=_as_text(data.get("brand")),
            image=_as_text(data.get("image")),
            price=price,
            count_in_stock=int(data.get("countInStock", data.get("count_in_stock", 0)) or 0),
            rating=float(data.get("rating", 0) or 0),
            num_reviews=int(data.get("numReviews", data.get("num_reviews", 0)) or 0),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "brand": self.brand,
            "image": self.image,
            "price": float(self.price),
            "count_in_stock": self.count_in_stock,
            "in_stock": self.in_stock,
            "rating": self.rating,
            "num_reviews": self.num_reviews,
        }


@dataclass
class SearchMatch:
    """
    Transient pairing of a catalog item with its relevance score.

    Attributes:
        item: The scored catalog item
        score: Additive integer relevance score (0 means no match)
        position: Index of the item in the input sequence, used as tie-break
    """

    item: CatalogItem
    score: int
    position: int

    @property
    def sort_key(self) -> tuple:
        """Descending score, then ascending input position."""
        return (-self.score, self.position)

    def to_dict(self, include_item: Optional[bool] = True) -> dict:
        """Convert to dictionary for the explain endpoint."""
        result = {
            "id": self.item.id,
            "name": self.item.name,
            "category": self.item.category,
            "score": self.score,
            "position": self.position,
        }
        if include_item:
            result["item"] = self.item.to_dict()
        return result
