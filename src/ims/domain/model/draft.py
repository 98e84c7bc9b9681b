"""Form drafts: the unsaved text typed into the create and edit forms.

A draft holds raw strings exactly as entered. It is only validated and
coerced when the user submits, so a failed submission leaves the typed
values in place for a retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product, number_to_json
from ims.domain.model.value_objects import Money, Number, to_number

REQUIRED_FIELDS_MESSAGE = "Name, quantity and price are required"


@dataclass(frozen=True)
class ProductPayload:
    """Validated body of a create or update request."""

    name: str
    quantity: Number
    price: Money

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": number_to_json(self.quantity),
            "price": number_to_json(self.price.amount),
        }


@dataclass(frozen=True)
class ProductDraft:
    name: str = ""
    quantity: str = ""
    price: str = ""

    def is_blank(self) -> bool:
        return not (self.name or self.quantity or self.price)

    def with_fields(self, **fields: str) -> ProductDraft:
        """Return a copy with some fields replaced."""
        unknown = set(fields) - {"name", "quantity", "price"}
        if unknown:
            raise TypeError(f"Unknown draft fields: {', '.join(sorted(unknown))}")
        values = {"name": self.name, "quantity": self.quantity, "price": self.price}
        values.update({k: "" if v is None else str(v) for k, v in fields.items()})
        return ProductDraft(**values)

    def to_payload(self) -> ProductPayload:
        """Validate the draft and coerce it into a request payload.

        Quantity is not range-checked: negative and fractional values are
        passed through. Price must be a non-negative number.
        """
        name = self.name.strip()
        quantity = self.quantity.strip()
        price = self.price.strip()
        if not name or not quantity or not price:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        money = Money.of(price)
        if money.is_negative:
            raise ValidationError("Price cannot be negative")

        return ProductPayload(
            name=name,
            quantity=to_number(quantity, "quantity"),
            price=money,
        )

    @staticmethod
    def from_product(product: Product) -> ProductDraft:
        """Snapshot a product's current values into form text."""
        return ProductDraft(
            name=product.name,
            quantity=str(product.quantity),
            price=str(product.price.amount),
        )
