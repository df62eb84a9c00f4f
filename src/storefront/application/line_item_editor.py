"""Line-Item Editor: edit locally, commit on blur.

Each cart row owns one editor for its personalization text. Keystrokes
only change the local buffer; the cart is written once, at the moment
the field loses focus. Updates coming from the cart are copied into the
buffer only while the field is not focused, so nothing the customer is
typing gets overwritten.

    IDLE --focus()--> EDITING --blur()/commit--> IDLE
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from storefront.application.cart_store import CartStore
from storefront.domain.model.cart import CartItem
from storefront.domain.observable import Subscription

logger = logging.getLogger("storefront.editor")


class EditorState(Enum):
    IDLE = "IDLE"
    EDITING = "EDITING"


class LineItemEditor:

    def __init__(
        self,
        item: CartItem,
        commit: Callable[[str | None], None],
    ) -> None:
        self._commit = commit
        self._state = EditorState.IDLE
        self._buffer = item.child_name or ""
        self._seen = (item.id, item.child_name)
        self._subscription: Subscription | None = None

    # --- Binding to a cart row ------------------------------------------------

    @classmethod
    def for_row(cls, store: CartStore, index: int) -> LineItemEditor:
        """Create an editor for the cart line at *index*.

        Commits go to ``store.update_item_child_name(index, ...)`` and
        store changes are fed back through ``sync``. Call ``close()`` (or
        use the editor as a context manager) when the row goes away.
        """
        editor = cls(
            store.items[index],
            lambda value: store.update_item_child_name(index, value),
        )

        def on_change(changed: CartStore) -> None:
            items = changed.items
            if index < len(items):
                editor.sync(items[index])

        editor._subscription = store.subscribe(on_change)
        return editor

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self) -> LineItemEditor:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- State ----------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def value(self) -> str:
        return self._buffer

    @property
    def is_editing(self) -> bool:
        return self._state is EditorState.EDITING

    # --- Events ---------------------------------------------------------------

    def focus(self) -> None:
        self._state = EditorState.EDITING

    def input(self, text: str) -> None:
        self._buffer = text

    def blur(self) -> None:
        if self._state is not EditorState.EDITING:
            return
        self._state = EditorState.IDLE
        committed = self._buffer or None
        logger.debug("Committing personalization %r", committed)
        self._commit(committed)

    def sync(self, item: CartItem) -> None:
        """Observe the current cart item for this row.

        A change seen while editing is dropped, not replayed on blur.
        """
        seen = (item.id, item.child_name)
        if seen == self._seen:
            return
        self._seen = seen
        if self._state is EditorState.EDITING:
            logger.debug("External update to %s ignored while editing", item.id)
            return
        self._buffer = item.child_name or ""
