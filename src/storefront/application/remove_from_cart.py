"""Application service: Remove From Cart use case (one unit at a time)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore


class RemoveFromCartHandler:

    def __init__(self, store: CartStore) -> None:
        self._store = store

    def handle(self, product_id: str) -> int:
        """Take one unit of *product_id* out of the cart.

        Returns the quantity left on that line (0 once the line is gone
        or if the product was never in the cart).
        """
        self._store.remove_item(product_id)
        for item in self._store.items:
            if item.id == product_id:
                return item.quantity.value
        return 0
