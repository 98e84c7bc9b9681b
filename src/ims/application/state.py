"""Application state owned by the InventoryController."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ims.application.view import DEFAULT_SORT_KEY
from ims.domain.model.draft import ProductDraft
from ims.domain.model.product import Product


class Theme(enum.Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @staticmethod
    def parse(value: str | None) -> Theme:
        """Stored value to Theme; anything unknown falls back to light."""
        try:
            return Theme(value)
        except ValueError:
            return Theme.LIGHT


class InteractionMode(enum.Enum):
    """Where the user is in a create, edit or delete flow.

    Only one flow can be active at a time, which serialises mutations.
    """

    IDLE = "IDLE"
    EDIT_MODAL_OPEN = "EDIT_MODAL_OPEN"
    CONFIRMING_DELETE = "CONFIRMING_DELETE"
    SUBMITTING = "SUBMITTING"


@dataclass
class AppState:
    products: list[Product] = field(default_factory=list)
    search_term: str = ""
    sort_key: str = DEFAULT_SORT_KEY
    theme: Theme = Theme.LIGHT
    form_draft: ProductDraft = field(default_factory=ProductDraft)
    edit_draft: ProductDraft | None = None
    edit_target_id: str | None = None
    mode: InteractionMode = InteractionMode.IDLE
    show_about: bool = False

    @property
    def modal_open(self) -> bool:
        return self.show_about or self.mode is InteractionMode.EDIT_MODAL_OPEN

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None
