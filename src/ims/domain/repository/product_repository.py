"""Abstract repository for the Product collection.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the external
product API over HTTP and lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.draft import ProductPayload
from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return the full product collection.

        Raises FetchError if the collection cannot be retrieved.
        """

    @abstractmethod
    def create(self, payload: ProductPayload) -> Product:
        """Create a product and return it with its assigned ID.

        Raises SaveError on failure.
        """

    @abstractmethod
    def update(self, product_id: str, payload: ProductPayload) -> Product:
        """Replace a product's fields. Raises UpdateError on failure."""

    @abstractmethod
    def remove(self, product_id: str) -> None:
        """Delete a product. Raises DeleteError on failure."""
