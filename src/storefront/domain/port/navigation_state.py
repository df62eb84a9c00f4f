"""Port for the navigable state the catalog keeps in the URL.

The catalog reads and writes exactly one query parameter (``type``)
through this interface. Concrete adapters wrap whatever routing the
environment provides; they must notify subscribers whenever the
current location changes, whether through ``set`` or through outside
navigation such as the back button.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.observable import Observable


class NavigationState(Observable, ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the current value of query parameter *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str | None) -> None:
        """Navigate to the current location with *key* set (or removed if None)."""
