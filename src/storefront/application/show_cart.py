"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO


class ShowCartHandler:

    def __init__(self, store: CartStore) -> None:
        self._store = store

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    index=index,
                    id=item.id,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                    child_name=item.child_name,
                )
                for index, item in enumerate(self._store.items)
            ],
            total=str(self._store.total),
            item_count=self._store.item_count,
        )
