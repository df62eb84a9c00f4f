"""Abstract persistence for the cart's line items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from storefront.domain.model.cart import CartItem


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartItem]:
        """Return the stored line items in cart order (empty if none)."""

    @abstractmethod
    def save(self, items: Sequence[CartItem]) -> None:
        """Replace the stored cart with *items*."""
