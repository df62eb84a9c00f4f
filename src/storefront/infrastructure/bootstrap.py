"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.domain.model.catalog import PRODUCT_TYPES
from storefront.domain.service.collation import Collator, get_collator
from storefront.infrastructure.navigation.url_navigation_state import (
    UrlNavigationState,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.settings import Settings


def data_dir() -> Path:
    return Settings.DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json", currency=Settings.CURRENCY)


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "cart.json")


def cart_store() -> CartStore:
    """Cart store restored from disk and written back after every change."""
    repo = cart_repository()
    store = CartStore(repo.load(), currency=Settings.CURRENCY)
    store.subscribe(lambda changed: repo.save(changed.items))
    return store


def navigation(url: str | None = None) -> UrlNavigationState:
    return UrlNavigationState(url or Settings.CATALOG_PATH)


def collator() -> Collator:
    return get_collator(Settings.LOCALE)


def canonical_types() -> tuple[str, ...]:
    return Settings.PRODUCT_TYPES or PRODUCT_TYPES
