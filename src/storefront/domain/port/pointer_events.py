"""Port for global pointer-down events, used to dismiss open menus."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Screen region occupied by a menu (its button plus dropdown)."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, event: PointerEvent) -> bool:
        return (
            self.x <= event.x <= self.x + self.width
            and self.y <= event.y <= self.y + self.height
        )


PointerListener = Callable[[PointerEvent], None]


class PointerEventSource(ABC):

    @abstractmethod
    def add_listener(self, listener: PointerListener) -> None:
        """Start delivering pointer-down events to *listener*."""

    @abstractmethod
    def remove_listener(self, listener: PointerListener) -> None:
        """Stop delivering events to *listener*; unknown listeners are ignored."""
