"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger("storefront.persistence")


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartItem]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._to_domain(item) for item in raw]

    def save(self, items: Sequence[CartItem]) -> None:
        raw = [self._to_raw(item) for item in items]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        logger.debug("Saved %d cart lines to %s", len(raw), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "price": item.price.amount,
            "currency": item.price.currency,
            "quantity": item.quantity.value,
            "image_url": item.image_url,
            "child_name": item.child_name,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartItem:
        try:
            return CartItem(
                id=raw["id"],
                name=raw["name"],
                price=Money(raw["price"], raw.get("currency", "EUR")),
                quantity=Quantity(raw["quantity"]),
                image_url=raw.get("image_url"),
                child_name=raw.get("child_name"),
            )
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed cart record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
