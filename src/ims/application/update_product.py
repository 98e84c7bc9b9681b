"""Application service: Update Product use case."""

from __future__ import annotations

from ims.domain.model.draft import ProductDraft
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, draft: ProductDraft) -> Product:
        """Replace all fields of a product with the edit draft.

        There is no version check: if another session changed the
        product in the meantime, this write wins.
        """
        payload = draft.to_payload()
        return self._product_repo.update(product_id, payload)
