"""Catalog view model and the filter → search → sort pipeline.

Every function here is pure: it takes the product collection and the
view state and returns a new list, leaving the input untouched. The
collections are small, so the whole pipeline simply re-runs whenever
any input changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from storefront.domain.model.product import Product
from storefront.domain.service.collation import Collator, get_collator

# Canonical, ordered list of the type tags the shop knows about. Filter
# options are offered in this order.
PRODUCT_TYPES: tuple[str, ...] = (
    "Тениски",
    "Бодита",
    "Суитшърти",
    "Чаши",
    "Възглавници",
    "Торбички",
    "Играчки",
    "Аксесоари",
)


class SortOption(Enum):
    DEFAULT = "default"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.DEFAULT: "Default order",
    SortOption.PRICE_ASC: "Price ↑",
    SortOption.PRICE_DESC: "Price ↓",
    SortOption.NAME_ASC: "Name A-Z",
    SortOption.NAME_DESC: "Name Z-A",
}


@dataclass(frozen=True)
class CatalogViewState:
    """UI-only state of the catalog page.

    Reset to these defaults on every full page load; ``selected_type``
    is then re-derived from the URL.
    """

    search_term: str = ""
    sort_option: SortOption = SortOption.DEFAULT
    selected_type: str | None = None
    is_filter_open: bool = False
    is_sort_open: bool = False

    @property
    def any_menu_open(self) -> bool:
        return self.is_filter_open or self.is_sort_open


# --- Pipeline stages ----------------------------------------------------------


def filter_by_type(products: Iterable[Product], selected_type: str | None) -> list[Product]:
    """Keep products whose type equals *selected_type* exactly.

    No selection (``None`` or ``""``) keeps everything.
    """
    if not selected_type:
        return list(products)
    return [p for p in products if p.product_type == selected_type]


def filter_by_search(products: Iterable[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on name or description."""
    needle = term.lower()
    kept: list[Product] = []
    for product in products:
        name_match = needle in product.name.lower()
        description_match = (
            needle in product.description.lower() if product.description else False
        )
        if name_match or description_match:
            kept.append(product)
    return kept


def sort_products(
    products: Iterable[Product],
    option: SortOption,
    collator: Collator | None = None,
) -> list[Product]:
    """Stable sort by *option*; ties keep their incoming order."""
    result = list(products)
    if option is SortOption.DEFAULT:
        return result

    if option in (SortOption.PRICE_ASC, SortOption.PRICE_DESC):
        return sorted(
            result,
            key=lambda p: p.unit_amount,
            reverse=option is SortOption.PRICE_DESC,
        )

    collator = collator or get_collator()
    return sorted(
        result,
        key=lambda p: collator.sort_key(p.name),
        reverse=option is SortOption.NAME_DESC,
    )


def apply_view(
    products: Sequence[Product],
    state: CatalogViewState,
    collator: Collator | None = None,
) -> list[Product]:
    """Run type filter, then search, then sort."""
    filtered = filter_by_type(products, state.selected_type)
    filtered = filter_by_search(filtered, state.search_term)
    return sort_products(filtered, state.sort_option, collator)


def available_types(
    products: Iterable[Product],
    canonical: Sequence[str] = PRODUCT_TYPES,
) -> list[str]:
    """Canonical types that at least one product actually carries.

    Computed over the unfiltered collection so the filter menu never
    offers an empty category; unknown tags are left out.
    """
    present = {p.product_type for p in products if p.product_type}
    return [t for t in canonical if t in present]
