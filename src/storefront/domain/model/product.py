"""Product record.

Products are owned by the external catalog/payment provider. The
storefront only reads them: filtering, sorting and adding to the cart
never modify a Product.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product as fetched from the catalog provider.

    ``id`` is stable and unique within one fetch. Every other field
    besides ``name`` may be missing upstream.
    """

    id: str
    name: str
    description: str | None = None
    price: Money | None = None
    product_type: str | None = None
    image_url: str | None = None

    @property
    def unit_amount(self) -> int:
        """Price in minor units; a product without a price counts as 0."""
        return self.price.amount if self.price is not None else 0
