"""Application service: Browse Catalog use case (query).

Builds a catalog view for one request, applies the requested search,
sort and type selection the way the page would, and returns what the
page would render.
"""

from __future__ import annotations

from typing import Sequence

from storefront.application.catalog_view import CatalogViewEngine
from storefront.application.dto import CatalogPageDTO, ProductDTO
from storefront.domain.model.catalog import PRODUCT_TYPES, SortOption
from storefront.domain.port.navigation_state import NavigationState
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.collation import Collator


class BrowseCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        navigation: NavigationState,
        collator: Collator | None = None,
        canonical_types: Sequence[str] = PRODUCT_TYPES,
    ) -> None:
        self._product_repo = product_repo
        self._navigation = navigation
        self._collator = collator
        self._canonical_types = canonical_types

    def handle(
        self,
        search_term: str = "",
        sort_option: SortOption = SortOption.DEFAULT,
        product_type: str | None = None,
        clear_type: bool = False,
    ) -> CatalogPageDTO:
        """Render the catalog.

        *product_type* selects a type filter (written to the URL);
        *clear_type* removes it. With neither, the URL decides.
        """
        with CatalogViewEngine(
            self._product_repo.list_all(),
            self._navigation,
            collator=self._collator,
            canonical_types=self._canonical_types,
        ) as engine:
            if clear_type:
                engine.select_type(None)
            elif product_type is not None:
                engine.select_type(product_type)
            engine.set_search_term(search_term)
            engine.set_sort_option(sort_option)

            state = engine.state
            return CatalogPageDTO(
                products=[
                    ProductDTO(
                        id=p.id,
                        name=p.name,
                        price=str(p.price) if p.price is not None else "-",
                        product_type=p.product_type,
                        description=p.description,
                    )
                    for p in engine.visible_products
                ],
                available_types=engine.available_types,
                selected_type=state.selected_type,
                sort_option=state.sort_option.value,
                sort_label=state.sort_option.label,
                search_term=state.search_term,
            )
