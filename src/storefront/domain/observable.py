"""Explicit subscribe/notify contract for state containers.

State holders (the cart store, the catalog view, navigation adapters)
extend ``Observable`` and call ``_notify()`` after every change. Nothing
here knows about rendering: a subscriber is any callable taking the
observable that changed.
"""

from __future__ import annotations

from typing import Callable


class Subscription:
    """Handle returned by ``Observable.subscribe``.

    ``unsubscribe()`` is idempotent. Can be used as a context manager so
    the subscription is released on any exit path.
    """

    def __init__(self, owner: Observable, callback: Callable) -> None:
        self._owner = owner
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._owner._remove(self._callback)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info) -> None:
        self.unsubscribe()


class Observable:

    def __init__(self) -> None:
        self._subscribers: list[Callable] = []

    def subscribe(self, callback: Callable) -> Subscription:
        """Register *callback* to be called with ``self`` after each change."""
        self._subscribers.append(callback)
        return Subscription(self, callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _remove(self, callback: Callable) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _notify(self) -> None:
        # Snapshot: (un)subscribing during a notification applies next time.
        for callback in list(self._subscribers):
            callback(self)
