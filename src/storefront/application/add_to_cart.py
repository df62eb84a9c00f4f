"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartItem
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store: CartStore,
        currency: str = "EUR",
    ) -> None:
        self._product_repo = product_repo
        self._store = store
        self._currency = currency

    def handle(self, product_id: str, quantity: int = 1) -> CartItem:
        """Add *quantity* units of a catalog product to the cart.

        Returns the cart line the product ended up on.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        self._store.add_item(
            CartItem.from_product(product, quantity, currency=self._currency)
        )
        return next(item for item in self._store.items if item.id == product_id)
