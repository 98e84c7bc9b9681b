"""Application service: Add Product use case."""

from __future__ import annotations

from ims.domain.model.draft import ProductDraft
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, draft: ProductDraft) -> Product:
        """Create a product from a form draft.

        The draft is validated before any request is issued, so a
        ValidationError means the API was never called.
        """
        payload = draft.to_payload()
        return self._product_repo.create(payload)
