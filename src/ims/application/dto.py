"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the derived view to the CLI without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: one table row as displayed to the user."""

    id: str
    name: str
    quantity: str
    price: str  # formatted, e.g. "R$ 15,50"
    total_value: str
    low_stock: bool


@dataclass(frozen=True)
class InventoryViewDTO:
    """Output: the filtered, sorted table plus summary figures."""

    rows: list[ProductRowDTO]
    sort_key: str
    search_term: str
    total_inventory_value: str
    low_stock_count: int
    low_stock_names: list[str]
    shown: int
    stored: int
