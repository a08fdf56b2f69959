"""
==============================================================================
Product Store Module
==============================================================================

In-memory product store.

Features:
---------
- Insertion-ordered list of products
- Linear-scan lookups by id and by type label
- Duplicate-id rejection on save
- A single lock around every operation, so the existence check and the
  mutation in save/delete happen as one step

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from product_api.core import exceptions
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Authoritative in-memory collection of products.

    Products are frozen models and every list returned is a fresh copy,
    so callers cannot change the store's state through a result.

    Example:
        >>> store = ProductStore([clean_code])
        >>> store.find_by_type("book")
        [Product(id='CLN-CDE-BOOK', ...)]
        >>> store.delete("CLN-CDE-BOOK")
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        """
        Initialize the store.

        Args:
            products: Initial products, inserted in order through save()

        Raises:
            DuplicateResourceError: If the initial products repeat an id
        """
        self._products: List[Product] = []
        self._lock = threading.Lock()

        for product in products:
            self.save(product)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_all(self) -> List[Product]:
        """Get all products in insertion order."""
        with self._lock:
            return self._products.copy()

    def find_by_type(self, product_type: str) -> List[Product]:
        """
        Get products whose type label matches, ignoring case.

        Args:
            product_type: External type label (e.g., "Book")

        Returns:
            Matching products; empty when nothing matches
        """
        key = product_type.casefold()
        with self._lock:
            return [p for p in self._products if p.type.label.casefold() == key]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by exact id, or None."""
        with self._lock:
            return self._find(product_id)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def save(self, product: Product) -> Product:
        """
        Append a new product.

        Raises:
            DuplicateResourceError: If the id is already stored
        """
        with self._lock:
            if self._find(product.id) is not None:
                raise exceptions.product_exists(product.id)
            self._products.append(product)

        logger.debug(f"Saved product {product.id}")
        return product

    def delete(self, product_id: str) -> None:
        """
        Remove the product with the given id.

        Raises:
            ResourceNotFoundError: If no product has that id
        """
        with self._lock:
            product = self._find(product_id)
            if product is None:
                raise exceptions.product_not_found(product_id)
            self._products.remove(product)

        logger.debug(f"Deleted product {product_id}")

    def _find(self, product_id: str) -> Optional[Product]:
        # Caller holds the lock
        for product in self._products:
            if product.id == product_id:
                return product
        return None
