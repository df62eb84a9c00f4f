"""Domain service: locale-aware string collation for catalog sorting.

Product names are sorted the way a reader of the catalog language
expects: accented letters next to their base letter, Cyrillic in
alphabet order. Raw code-point comparison gets both wrong, so names are
compared through Unicode Collation Algorithm keys (``pyuca``).

Only the root collation order (DUCET) is available. The catalog is
Bulgarian, which uses that order unchanged; languages whose alphabet
needs tailoring (Swedish, German phonebook, ...) are rejected rather
than silently sorted in the wrong order.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pyuca import Collator as _UcaCollator

from storefront.domain.exceptions import ValidationError

logger = logging.getLogger("storefront.catalog")

DEFAULT_LOCALE = "bg"

# Languages whose alphabetical order is the untailored root order.
ROOT_ORDER_LOCALES = frozenset({"bg", "en"})


class Collator:

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        language = locale.replace("_", "-").split("-")[0].lower()
        if language not in ROOT_ORDER_LOCALES:
            raise ValidationError(
                f"Unsupported catalog locale '{locale}'; "
                f"supported: {', '.join(sorted(ROOT_ORDER_LOCALES))}"
            )
        self.locale = locale
        self._uca = _UcaCollator()

    def sort_key(self, text: str) -> tuple:
        return self._uca.sort_key(text)

    def compare(self, a: str, b: str) -> int:
        """Negative, zero or positive like ``String.localeCompare``."""
        key_a, key_b = self.sort_key(a), self.sort_key(b)
        return (key_a > key_b) - (key_a < key_b)


@lru_cache(maxsize=None)
def get_collator(locale: str = DEFAULT_LOCALE) -> Collator:
    """Return the shared collator for *locale* (loading the table is slow)."""
    logger.debug("Loading collation table for locale %s", locale)
    return Collator(locale)
