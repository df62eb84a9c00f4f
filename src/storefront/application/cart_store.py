"""Cart Store: the observable owner of the cart.

This is the whole contract the rest of the storefront (and any
persistence layer) sees: ``items``, ``add_item``, ``remove_item`` and
``update_item_child_name``. Each mutation is applied synchronously and
subscribers are notified before the call returns.
"""

from __future__ import annotations

import logging
from typing import Iterable

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Money
from storefront.domain.observable import Observable

logger = logging.getLogger("storefront.cart")


class CartStore(Observable):

    def __init__(self, items: Iterable[CartItem] = (), currency: str = "EUR") -> None:
        super().__init__()
        self._cart = Cart(list(items), currency)

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._cart.items)

    @property
    def total(self) -> Money:
        return self._cart.total

    @property
    def item_count(self) -> int:
        return self._cart.item_count

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartItem) -> None:
        self._cart.add_item(item)
        logger.debug("Added %s x%d to cart", item.id, item.quantity.value)
        self._notify()

    def remove_item(self, item_id: str) -> None:
        if not self._cart.remove_item(item_id):
            logger.debug("Remove ignored: %s is not in the cart", item_id)
            return
        logger.debug("Removed one %s from cart", item_id)
        self._notify()

    def update_item_child_name(self, index: int, child_name: str | None) -> None:
        if not self._cart.update_item_child_name(index, child_name):
            logger.debug("Personalization ignored: no cart line at index %d", index)
            return
        logger.debug("Personalization of line %d set to %r", index, child_name)
        self._notify()
