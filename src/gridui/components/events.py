"""
Notification hooks and the immutable records they deliver.
Subscriber counting drives the widget's wants-notify flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Generic, TypeVar

E = TypeVar("E")

Handler = Callable[[E], Any]


class EventHook(Generic[E]):
    """
    Subscriber list for one notification kind.

    Supports ``hook += handler`` / ``hook -= handler`` and use as a decorator
    through :meth:`subscribe`. The optional callbacks let the owner keep an
    explicit subscriber count.
    """

    def __init__(
        self,
        name: str,
        on_subscribe: Callable[[], None] | None = None,
        on_unsubscribe: Callable[[], None] | None = None,
    ) -> None:
        self.name = name
        self._handlers: list[Handler[E]] = []
        self._on_subscribe = on_subscribe
        self._on_unsubscribe = on_unsubscribe

    def subscribe(self, handler: Handler[E]) -> Handler[E]:
        """Register a handler; the same handler may be registered twice."""
        self._handlers.append(handler)
        if self._on_subscribe is not None:
            self._on_subscribe()
        return handler

    def unsubscribe(self, handler: Handler[E]) -> None:
        """Remove one registration of a handler; unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            return
        if self._on_unsubscribe is not None:
            self._on_unsubscribe()

    def __iadd__(self, handler: Handler[E]) -> EventHook[E]:
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Handler[E]) -> EventHook[E]:
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    @property
    def has_subscribers(self) -> bool:
        return bool(self._handlers)

    def fire(self, event: E) -> None:
        # Copy: handlers may unsubscribe while being called
        for handler in list(self._handlers):
            handler(event)

    def __repr__(self) -> str:
        return f"EventHook({self.name!r}, subscribers={len(self._handlers)})"


@dataclass(frozen=True)
class PendingChange:
    """Change recorded in phase 1, consumed in phase 2."""

    payload: Any


# ============================================================================
# Event records
# ============================================================================


@dataclass(frozen=True)
class DialogEvent:
    sender: Any


@dataclass(frozen=True)
class PressedEvent:
    sender: Any


@dataclass(frozen=True)
class CheckedChangedEvent:
    sender: Any
    is_checked: bool


@dataclass(frozen=True)
class ValueChangedEvent:
    """A single-valued widget changed from ``previous`` to ``value``."""

    sender: Any
    value: Any
    previous: Any


@dataclass(frozen=True)
class OptionCheckedEvent:
    sender: Any
    option: str
    is_checked: bool


@dataclass(frozen=True)
class DateTimeChangedEvent:
    sender: Any
    value: datetime
    previous: datetime


@dataclass(frozen=True)
class TreeViewChangedEvent:
    """Check state changed; ``node`` is the node held responsible."""

    sender: Any
    node: Any


@dataclass(frozen=True)
class TreeViewNodesEvent:
    """Nodes whose expanded/collapsed state changed."""

    sender: Any
    nodes: tuple[Any, ...]
