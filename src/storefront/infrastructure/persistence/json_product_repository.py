"""JSON-file-backed implementation of ProductRepository.

Reads an export of the payment provider's product list. Both the API
envelope (``{"data": [...]}``) and a bare list are accepted; the fields
used are ``id``, ``name``, ``description``, ``images``,
``metadata.productType`` and ``default_price.unit_amount`` /
``default_price.currency``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("storefront.persistence")


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, currency: str = "EUR") -> None:
        self._file_path = file_path
        self._currency = currency

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return self._load()

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._load():
            if product.id == product_id:
                return product
        return None

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        if not self._file_path.exists():
            logger.warning("Product file %s not found; catalog is empty", self._file_path)
            return []
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            raw = raw.get("data", [])
        return [self._to_domain(item) for item in raw]

    def _to_domain(self, item: dict) -> Product:
        try:
            product_id = item["id"]
            name = item["name"]
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed product record: {item!r}") from exc

        price = None
        default_price = item.get("default_price")
        if isinstance(default_price, dict) and default_price.get("unit_amount") is not None:
            price = Money(
                default_price["unit_amount"],
                (default_price.get("currency") or self._currency).upper(),
            )

        images = item.get("images") or []
        metadata = item.get("metadata") or {}
        return Product(
            id=product_id,
            name=name,
            description=item.get("description") or None,
            price=price,
            product_type=metadata.get("productType") or None,
            image_url=images[0] if images else None,
        )
