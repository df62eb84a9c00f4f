"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the CLI
without exposing domain internals. Money values are already formatted
(e.g. ``"8.00 €"``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    index: int
    id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str
    child_name: str | None


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str
    item_count: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    product_type: str | None
    description: str | None


@dataclass(frozen=True)
class CatalogPageDTO:
    """Output: one render of the catalog page."""

    products: list[ProductDTO]
    available_types: list[str]
    selected_type: str | None
    sort_option: str
    sort_label: str
    search_term: str
