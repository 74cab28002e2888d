"""
Product store interface.

Defines the four storage primitives every product backend implements
(list, get, put, delete) plus helpers built purely on top of them.

Dependencies: backend.models
System role: Contract between application code and product persistence
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator

from backend.models.product import Product, ProductRange


class ProductStore(ABC):
    """
    Abstract base for product storage backends.

    Implementations hold no state between calls beyond their client handle.
    """

    @abstractmethod
    def list_products(self, next_token: str | None = None) -> ProductRange:
        """
        Return one page of products.

        Args:
            next_token: Continuation token from a previous page, or None to start

        Returns:
            ProductRange: Products plus the token for the following page
        """

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return the product for product_id, or None if it does not exist."""

    @abstractmethod
    def put_product(self, product: Product | dict[str, Any]) -> None:
        """Create or fully overwrite the product stored under its id."""

    @abstractmethod
    def delete_product(self, product_id: str) -> None:
        """Delete a product. No-op if it does not exist."""

    def iter_products(self) -> Iterator[Product]:
        """
        Iterate over every stored product, fetching pages lazily.

        Yields:
            Product: Each stored product, in listing order
        """
        next_token: str | None = None
        while True:
            page = self.list_products(next_token)
            yield from page.products
            if page.next is None:
                return
            next_token = page.next

    def exists(self, product_id: str) -> bool:
        """Return True if a product is stored under product_id."""
        return self.get_product(product_id) is not None
