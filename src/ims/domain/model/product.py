"""Product entity.

Products are owned by the external product API. The client only ever
holds a read-only copy that is replaced wholesale after each mutation,
so the entity is a frozen dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, Number, to_number

# Products with fewer units than this are flagged as low stock.
LOW_STOCK_THRESHOLD = 4


@dataclass(frozen=True)
class Product:
    """An inventory item as returned by the product API.

    ``id`` is assigned by the API and treated as opaque text.
    """

    id: str
    name: str
    quantity: Number
    price: Money

    @property
    def total_value(self) -> Money:
        return self.price * self.quantity

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < LOW_STOCK_THRESHOLD

    @staticmethod
    def from_json(raw: dict[str, Any]) -> Product:
        """Build a Product from one API record.

        Raises ValidationError if the record is missing a field or a
        numeric field cannot be coerced.
        """
        if not isinstance(raw, dict):
            raise ValidationError(f"Product record must be an object, got {raw!r}")
        try:
            product_id = raw["id"]
            name = raw["name"]
            quantity = raw["quantity"]
            price = raw["price"]
        except KeyError as exc:
            raise ValidationError(f"Product record is missing {exc.args[0]!r}") from exc
        if product_id is None:
            raise ValidationError("Product record has no id")
        return Product(
            id=str(product_id),
            name=str(name),
            quantity=to_number(quantity, "quantity"),
            price=Money.of(price),
        )


def number_to_json(value: Number) -> int | float:
    """JSON-encodable form of a quantity or amount."""
    if isinstance(value, Decimal):
        return float(value)
    return value
