"""Derived view: filtering, sorting and aggregation of the product list.

Everything here is a pure function of ``(products, search_term, sort_key)``.
The view is recomputed on every render and never cached, so it cannot
go stale relative to the product cache.

Sort keys are strings of the form ``<field>-<direction>``, e.g.
``price-desc``, which is also how they are persisted.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any

from ims.application.dto import InventoryViewDTO, ProductRowDTO
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

ASCENDING = "asc"
DESCENDING = "desc"
DEFAULT_SORT_KEY = "name-asc"


def _collation_key(name: str) -> tuple[str, str]:
    """Locale-style ordering: accents and case only break ties.

    ``"água" < "banana" < "Banana" < "caixa"``.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # swapcase puts lowercase before uppercase among otherwise equal names
    return base.casefold(), name.swapcase()


SORT_FIELDS: dict[str, Callable[[Product], Any]] = {
    "name": lambda p: _collation_key(p.name),
    "quantity": lambda p: p.quantity,
    "price": lambda p: p.price.amount,
    "totalValue": lambda p: p.total_value.amount,
}


def parse_sort_key(sort_key: str) -> tuple[str, str] | None:
    """Split ``"price-desc"`` into ``("price", "desc")``.

    Returns None for anything that is not a known field and direction.
    """
    field, _, direction = sort_key.rpartition("-")
    if field not in SORT_FIELDS or direction not in (ASCENDING, DESCENDING):
        return None
    return field, direction


def toggle_sort_key(current: str, field: str) -> str:
    """Sort key after the user selects ``field``.

    Selecting the active ascending field flips it to descending; any
    other selection (including the active descending field) sorts
    ascending by that field.
    """
    ascending = f"{field}-{ASCENDING}"
    if current == ascending:
        return f"{field}-{DESCENDING}"
    return ascending


# --- Filter / sort -------------------------------------------------------------


def filter_products(products: Iterable[Product], term: str) -> list[Product]:
    """Keep products whose name contains ``term``, ignoring case."""
    needle = term.casefold()
    if not needle:
        return list(products)
    return [p for p in products if needle in p.name.casefold()]


def sort_products(products: Iterable[Product], sort_key: str) -> list[Product]:
    """Stable sort by ``sort_key``. Unknown keys keep the input order.

    ``sorted(reverse=True)`` keeps equal elements in their original
    order, so descending is also stable and sorting is idempotent.
    """
    items = list(products)
    parsed = parse_sort_key(sort_key)
    if parsed is None:
        return items
    field, direction = parsed
    return sorted(items, key=SORT_FIELDS[field], reverse=direction == DESCENDING)


# --- Aggregates (always over the full, unfiltered list) -------------------------


def total_inventory_value(products: Iterable[Product]) -> Money:
    total = Money.zero()
    for product in products:
        total = total + product.total_value
    return total


def low_stock(products: Iterable[Product]) -> list[Product]:
    return [p for p in products if p.is_low_stock]


# --- Composition ------------------------------------------------------------------


def build_view(
    products: list[Product],
    search_term: str,
    sort_key: str,
) -> InventoryViewDTO:
    """Compute the displayed rows and the summary figures."""
    visible = sort_products(filter_products(products, search_term), sort_key)
    alerts = low_stock(products)
    return InventoryViewDTO(
        rows=[_to_row(p) for p in visible],
        sort_key=sort_key,
        search_term=search_term,
        total_inventory_value=str(total_inventory_value(products)),
        low_stock_count=len(alerts),
        low_stock_names=[p.name for p in alerts],
        shown=len(visible),
        stored=len(products),
    )


def _to_row(product: Product) -> ProductRowDTO:
    return ProductRowDTO(
        id=product.id,
        name=product.name,
        quantity=str(product.quantity),
        price=str(product.price),
        total_value=str(product.total_value),
        low_stock=product.is_low_stock,
    )
