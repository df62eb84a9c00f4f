"""Application service: Personalize Cart Line use case.

Drives the same focus → type → blur sequence a customer goes through
in the checkout form, so the cart is written exactly once.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.line_item_editor import LineItemEditor
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartItem


class PersonalizeItemHandler:

    def __init__(self, store: CartStore) -> None:
        self._store = store

    def handle(self, index: int, child_name: str | None) -> CartItem:
        if not 0 <= index < len(self._store.items):
            raise EntityNotFoundError(f"Cart line #{index} not found")

        with LineItemEditor.for_row(self._store, index) as editor:
            editor.focus()
            editor.input(child_name or "")
            editor.blur()

        return self._store.items[index]
