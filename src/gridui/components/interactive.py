"""
Interactive widgets and the two-phase update contract.

Phase 1 (:meth:`InteractiveWidget.apply_result`) syncs the widget with the
host's result payload and records a pending change. Phase 2
(:meth:`InteractiveWidget.raise_notifications`) fires the queued
notifications. The dialog runs phase 1 on every widget before phase 2 starts
on any of them, so handlers always observe fully updated siblings.
"""

from __future__ import annotations

from typing import Any

from ..layout.location import WidgetLocation
from ..models.blocks import BlockDefinition
from ..models.results import UIResults
from .events import EventHook, PendingChange
from .widget import Widget


class InteractiveWidget(Widget):
    """
    A widget whose value the user can change.

    ``wants_notify`` is true while at least one handler is subscribed to any
    of the widget's hooks. Subscriptions are counted explicitly through the
    hooks created with :meth:`_hook`.
    """

    # Widgets that must always report back (e.g. collapse buttons)
    notifies_always: bool = False

    def __init__(self) -> None:
        super().__init__()
        self.is_enabled = True
        self._subscriber_count = 0
        self._pending: PendingChange | None = None

    @property
    def dest_var(self) -> str:
        """Key under which the host reports this widget's value."""
        return self.id

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def _hook(self, name: str) -> EventHook[Any]:
        return EventHook(name, self._on_subscribe, self._on_unsubscribe)

    def _on_subscribe(self) -> None:
        self._subscriber_count += 1

    def _on_unsubscribe(self) -> None:
        self._subscriber_count -= 1

    @property
    def wants_notify(self) -> bool:
        return self.notifies_always or self._subscriber_count > 0

    # ------------------------------------------------------------------
    # Two-phase update
    # ------------------------------------------------------------------

    @property
    def has_pending_change(self) -> bool:
        return self._pending is not None

    def apply_result(self, results: UIResults) -> PendingChange | None:
        """
        Phase 1: take this widget's value from the payload.

        The widget's own value is always updated. A pending change is only
        recorded when somebody listens.

        Returns:
            The recorded change, or None when nothing is queued
        """
        self._pending = None
        payload = self._load_result(results)
        if payload is not None and self.wants_notify:
            self._pending = PendingChange(payload)
        return self._pending

    def raise_notifications(self) -> None:
        """Phase 2: fire queued notifications, then forget them."""
        pending, self._pending = self._pending, None
        if pending is not None:
            self._raise(pending.payload)

    def discard_pending(self) -> None:
        self._pending = None

    def _load_result(self, results: UIResults) -> Any | None:
        """
        Update the widget from ``results``.

        Returns:
            Change payload handed to :meth:`_raise`, or None when unchanged
        """
        raise NotImplementedError

    def _raise(self, payload: Any) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_block(self, location: WidgetLocation) -> BlockDefinition:
        block = super().to_block(location)
        block.dest_var = self.dest_var
        block.is_enabled = self.is_enabled
        block.wants_on_change = self.wants_notify
        return block
