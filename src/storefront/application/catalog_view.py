"""Catalog View Engine: search, sort and type filter over the catalog.

Owns the UI-only view state and derives the visible products from it.
The selected type lives in the URL: choosing a type only writes the
``type`` query parameter, and the state is re-derived whenever the
navigation reports a new location (including back/forward).

While at least one dropdown is open a single pointer-down listener is
installed to close menus on clicks outside them; it is removed as soon
as both menus are closed and always on ``close()``.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import replace
from typing import Sequence

from storefront.domain.model.catalog import (
    PRODUCT_TYPES,
    CatalogViewState,
    SortOption,
    apply_view,
    available_types,
)
from storefront.domain.model.product import Product
from storefront.domain.observable import Observable
from storefront.domain.port.navigation_state import NavigationState
from storefront.domain.port.pointer_events import (
    BoundingBox,
    PointerEvent,
    PointerEventSource,
)
from storefront.domain.service.collation import Collator

logger = logging.getLogger("storefront.catalog")

TYPE_PARAM = "type"


class CatalogViewEngine(Observable):

    def __init__(
        self,
        products: Sequence[Product],
        navigation: NavigationState,
        pointer_events: PointerEventSource | None = None,
        filter_bounds: BoundingBox | None = None,
        sort_bounds: BoundingBox | None = None,
        collator: Collator | None = None,
        canonical_types: Sequence[str] = PRODUCT_TYPES,
    ) -> None:
        super().__init__()
        self._products = tuple(products)
        self._navigation = navigation
        self._pointer_events = pointer_events
        self._filter_bounds = filter_bounds
        self._sort_bounds = sort_bounds
        self._collator = collator
        self._canonical_types = tuple(canonical_types)

        self._state = CatalogViewState(selected_type=self._type_from_url())
        self._listener_scope: ExitStack | None = None
        self._navigation_subscription = navigation.subscribe(self._on_navigation)

    # --- Derived views --------------------------------------------------------

    @property
    def state(self) -> CatalogViewState:
        return self._state

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def visible_products(self) -> list[Product]:
        return apply_view(self._products, self._state, self._collator)

    @property
    def available_types(self) -> list[str]:
        return available_types(self._products, self._canonical_types)

    @property
    def is_listening(self) -> bool:
        """True while the click-outside listener is installed."""
        return self._listener_scope is not None

    # --- Inputs ---------------------------------------------------------------

    def set_products(self, products: Sequence[Product]) -> None:
        self._products = tuple(products)
        logger.debug("Catalog replaced with %d products", len(self._products))
        self._notify()

    def set_search_term(self, term: str) -> None:
        self._update(search_term=term)

    def set_sort_option(self, option: SortOption) -> None:
        self._update(sort_option=option, is_sort_open=False)

    def select_type(self, product_type: str | None) -> None:
        """Write the type to the URL and close the filter menu.

        ``selected_type`` itself changes only when the navigation reports
        the new location.
        """
        self._update(is_filter_open=False)
        self._navigation.set(TYPE_PARAM, product_type or None)

    # --- Menus ----------------------------------------------------------------

    def toggle_filter_menu(self) -> None:
        self._update(is_filter_open=not self._state.is_filter_open)

    def toggle_sort_menu(self) -> None:
        self._update(is_sort_open=not self._state.is_sort_open)

    def close_menus(self) -> None:
        self._update(is_filter_open=False, is_sort_open=False)

    def _on_pointer_down(self, event: PointerEvent) -> None:
        changes = {}
        if self._filter_bounds is not None and not self._filter_bounds.contains(event):
            changes["is_filter_open"] = False
        if self._sort_bounds is not None and not self._sort_bounds.contains(event):
            changes["is_sort_open"] = False
        if changes:
            self._update(**changes)

    def _sync_listener(self) -> None:
        if self._pointer_events is None:
            return
        if self._state.any_menu_open and self._listener_scope is None:
            scope = ExitStack()
            self._pointer_events.add_listener(self._on_pointer_down)
            scope.callback(self._pointer_events.remove_listener, self._on_pointer_down)
            self._listener_scope = scope
            logger.debug("Click-outside listener attached")
        elif not self._state.any_menu_open and self._listener_scope is not None:
            self._detach_listener()

    def _detach_listener(self) -> None:
        if self._listener_scope is not None:
            scope, self._listener_scope = self._listener_scope, None
            scope.close()
            logger.debug("Click-outside listener detached")

    # --- Navigation -----------------------------------------------------------

    def _type_from_url(self) -> str | None:
        return self._navigation.get(TYPE_PARAM) or None

    def _on_navigation(self, _navigation: NavigationState) -> None:
        self._update(selected_type=self._type_from_url())

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Release the navigation subscription and any pointer listener."""
        self._detach_listener()
        self._navigation_subscription.unsubscribe()

    def __enter__(self) -> CatalogViewEngine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Internal helpers -----------------------------------------------------

    def _update(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        self._sync_listener()
        self._notify()
