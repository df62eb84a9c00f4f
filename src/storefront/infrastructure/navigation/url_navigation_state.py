"""URL-backed NavigationState with a browser-like history stack.

``set`` pushes a new entry the way a router push does; ``back`` pops to
the previous entry and ``navigate`` loads an arbitrary URL (a typed
address or a followed link). Subscribers are notified whenever the
current URL actually changes.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from storefront.domain.port.navigation_state import NavigationState

logger = logging.getLogger("storefront.navigation")


class UrlNavigationState(NavigationState):

    def __init__(self, url: str = "/products") -> None:
        super().__init__()
        self._history: list[str] = [url]

    @property
    def url(self) -> str:
        return self._history[-1]

    @property
    def can_go_back(self) -> bool:
        return len(self._history) > 1

    # --- NavigationState interface --------------------------------------------

    def get(self, key: str) -> str | None:
        for name, value in parse_qsl(urlsplit(self.url).query, keep_blank_values=True):
            if name == key:
                return value
        return None

    def set(self, key: str, value: str | None) -> None:
        parts = urlsplit(self.url)
        params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != key]
        if value is not None:
            params.append((key, value))
        query = urlencode(params, quote_via=quote)
        self.navigate(urlunsplit(("", "", parts.path, query, "")))

    # --- History --------------------------------------------------------------

    def navigate(self, url: str) -> None:
        if url == self.url:
            return
        self._history.append(url)
        logger.debug("Navigated to %s", url)
        self._notify()

    def back(self) -> None:
        if not self.can_go_back:
            return
        self._history.pop()
        logger.debug("Went back to %s", self.url)
        self._notify()
