"""
Catalog repository interface and implementations.

The catalog is owned outside the search engine; repositories only load
product records and hand out an immutable snapshot of them.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..domain.entities import CatalogItem
from ..domain.exceptions import CatalogLoadException

logger = logging.getLogger(__name__)


class ICatalogRepository(ABC):
    """
    Abstract repository interface for catalog access.

    ``version`` changes whenever the catalog contents change, so callers
    can key derived data (e.g. cached rankings) on it.
    """

    @property
    @abstractmethod
    def version(self) -> int:
        """Monotonic catalog version."""
        pass

    @abstractmethod
    def list_items(self) -> Tuple[CatalogItem, ...]:
        """
        Get all catalog items in catalog order.

        Returns:
            Immutable snapshot of the catalog
        """
        pass

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[CatalogItem]:
        """
        Find a product by its identifier.

        Args:
            product_id: Opaque product id

        Returns:
            CatalogItem if found, None otherwise
        """
        pass


class InMemoryCatalogRepository(ICatalogRepository):
    """Catalog held in memory; replaced wholesale on each update."""

    def __init__(self, items: Iterable[CatalogItem] = ()):
        self._lock = threading.Lock()
        self._version = 0
        self._items: Tuple[CatalogItem, ...] = ()
        self._by_id: dict = {}
        self.replace(items)

    @property
    def version(self) -> int:
        return self._version

    def list_items(self) -> Tuple[CatalogItem, ...]:
        return self._items

    def find_by_id(self, product_id: str) -> Optional[CatalogItem]:
        return self._by_id.get(product_id)

    def replace(self, items: Iterable[CatalogItem]) -> int:
        """
        Swap in a new catalog snapshot.

        Duplicate ids keep their first occurrence for lookups; all items
        stay in the listing.

        Returns:
            The new catalog version
        """
        snapshot = tuple(items)
        by_id: dict = {}
        for item in snapshot:
            by_id.setdefault(item.id, item)

        with self._lock:
            self._items = snapshot
            self._by_id = by_id
            self._version += 1
            version = self._version

        logger.info(f"Catalog updated: {len(snapshot)} items, version {version}")
        return version


class JsonCatalogRepository(InMemoryCatalogRepository):
    """
    Catalog loaded from a JSON file.

    The file holds either a list of product records or an object with a
    ``products`` list. Records use the storefront's product shape.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__()

    def load(self) -> int:
        """
        (Re)load the catalog from disk.

        Returns:
            The new catalog version

        Raises:
            CatalogLoadException: If the file is missing or malformed
        """
        source = str(self.path)
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogLoadException(source, "file not found") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadException(source, f"invalid JSON: {e.msg}") from e
        except OSError as e:
            raise CatalogLoadException(source, str(e)) from e

        if isinstance(data, dict):
            data = data.get("products")
        if not isinstance(data, list):
            raise CatalogLoadException(source, "expected a list of products")

        items = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise CatalogLoadException(source, f"record {index} is not an object")
            try:
                items.append(CatalogItem.from_dict(record))
            except (TypeError, ValueError, ArithmeticError) as e:
                raise CatalogLoadException(source, f"record {index}: {e}") from e

        return self.replace(items)
