"""Cart aggregate: the ordered list of line items.

Line items are immutable; every change replaces the entry at its
position so observers holding an old item never see it change under
them. None of the mutations raise for unknown ids or bad positions,
they simply leave the cart as it was and report that nothing changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    """One line of the cart.

    ``child_name`` is the free-text personalization printed on the item.
    It belongs to the line, not to the product, so two lines for the
    same product may carry different names.
    """

    id: str
    name: str
    price: Money
    quantity: Quantity
    image_url: str | None = None
    child_name: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value

    @staticmethod
    def from_product(product: Product, quantity: int = 1, currency: str = "EUR") -> CartItem:
        return CartItem(
            id=product.id,
            name=product.name,
            price=product.price if product.price is not None else Money.zero(currency),
            quantity=Quantity(quantity),
            image_url=product.image_url,
        )


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Entries are addressed by id for quantity changes and by position for
    personalization, because one product can appear on several lines.
    """

    items: list[CartItem] = field(default_factory=list)
    currency: str = "EUR"

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartItem) -> None:
        """Merge *item* into the first line with the same id, or append it.

        A merge keeps the existing line's name, price and personalization
        and only adds the incoming quantity.
        """
        index = self._find_index(item.id)
        if index is None:
            self.items.append(item)
            return
        existing = self.items[index]
        self.items[index] = replace(existing, quantity=existing.quantity + item.quantity)

    def remove_item(self, item_id: str) -> bool:
        """Take one unit off the first line with *item_id*.

        The line disappears instead of dropping to zero. Returns False
        when no line has that id.
        """
        index = self._find_index(item_id)
        if index is None:
            return False
        existing = self.items[index]
        if existing.quantity.value <= 1:
            del self.items[index]
        else:
            self.items[index] = replace(
                existing, quantity=Quantity(existing.quantity.value - 1)
            )
        return True

    def update_item_child_name(self, index: int, child_name: str | None) -> bool:
        """Replace the personalization of the line at *index*.

        Out-of-range positions (negative ones included) are ignored and
        return False.
        """
        if not 0 <= index < len(self.items):
            return False
        self.items[index] = replace(self.items[index], child_name=child_name or None)
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        """Sum of line totals in the currency of the priced lines.

        Zero-amount lines (products without a price) add nothing, so their
        currency never has to match. An empty or all-free cart totals zero
        in the cart's own currency.
        """
        priced = [item for item in self.items if item.price.amount]
        currency = priced[0].price.currency if priced else self.currency
        result = Money.zero(currency)
        for item in priced:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find_index(self, item_id: str) -> int | None:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return None
