"""Panel that places its children one after another."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass
from typing import overload

from ..components.base import Component
from ..components.widget import Widget
from ..core.validate import check_positive
from ..layout.location import PanelLocation, WidgetLocation, WidgetLocationPair
from ..layout.style import Direction
from .panel import Panel


@dataclass
class _Entry:
    component: Component
    span: int = 1


class StackPanel(Panel, MutableSequence):
    """
    Stacks children along one axis in registration order.

    A widget takes ``span`` slots along the axis. A nested panel takes as many
    slots as its own row (or column) count and none at all when that count is
    0. Hidden widgets take no slot, so showing or hiding a widget shifts the
    ones after it.

    Behaves as a mutable sequence of components.
    """

    def __init__(
        self, direction: Direction = Direction.VERTICAL, components: Iterable[Component] = ()
    ) -> None:
        super().__init__()
        self.direction = Direction(direction)
        self._entries: list[_Entry] = []
        for component in components:
            self.add(component)

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(entry.component for entry in self._entries)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, component: Component, span: int = 1) -> StackPanel:
        """
        Append a widget or panel.

        Returns:
            This panel, so calls can be chained

        Raises:
            CompositionError: If the component already has a parent or would form a cycle
            ValidationError: If the span is not positive
        """
        self.insert(len(self._entries), component, span)
        return self

    def insert(self, index: int, component: Component, span: int = 1) -> None:
        check_positive(span, "span")
        self._adopt(component)
        self._entries.insert(index, _Entry(component, span))

    def remove(self, component: Component) -> None:
        self._require_child(component)
        self.remove_at(self.index(component))

    def remove_at(self, index: int) -> Component:
        entry = self._entries.pop(index)
        self._release(entry.component)
        return entry.component

    def clear(self) -> None:
        for entry in self._entries:
            self._release(entry.component)
        self._entries.clear()

    def get_span(self, component: Component) -> int:
        self._require_child(component)
        return self._entries[self.index(component)].span

    def set_span(self, component: Component, span: int) -> None:
        self._require_child(component)
        self._entries[self.index(component)].span = check_positive(span, "span")

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Component]:
        return iter(self.children)

    @overload
    def __getitem__(self, index: int) -> Component: ...

    @overload
    def __getitem__(self, index: slice) -> list[Component]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [entry.component for entry in self._entries[index]]
        return self._entries[index].component

    def __setitem__(self, index, component):
        if isinstance(index, slice):
            raise TypeError("StackPanel does not support slice assignment")
        entry = self._entries[index]
        if component is entry.component:
            return
        # Validate first so a rejected component leaves the panel untouched
        self._adopt(component)
        self._release(entry.component)
        self._entries[index] = _Entry(component, entry.span)

    def __delitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("StackPanel does not support slice deletion")
        self.remove_at(index)

    def reverse(self) -> None:
        self._entries.reverse()

    def index(self, component: Component, start: int = 0, stop: int | None = None) -> int:
        stop = len(self._entries) if stop is None else stop
        for i in range(start, stop):
            if self._entries[i].component is component:
                return i
        raise ValueError(f"{component!r} is not in this panel")

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _widget_location(self, slot: int, span: int) -> WidgetLocation:
        if self.direction == Direction.VERTICAL:
            return WidgetLocation(slot, 0, span, 1)
        return WidgetLocation(0, slot, 1, span)

    def _panel_location(self, slot: int) -> PanelLocation:
        if self.direction == Direction.VERTICAL:
            return PanelLocation(slot, 0)
        return PanelLocation(0, slot)

    def _extent(self, pairs: list[WidgetLocationPair]) -> int:
        if self.direction == Direction.VERTICAL:
            return max((pair.location.end_row for pair in pairs), default=0)
        return max((pair.location.end_column for pair in pairs), default=0)

    def _resolve(self) -> Iterator[WidgetLocationPair]:
        slot = 0
        for entry in list(self._entries):
            component = entry.component
            if isinstance(component, Widget):
                if not component.is_visible:
                    continue
                yield WidgetLocationPair(component, self._widget_location(slot, entry.span))
                slot += entry.span
            elif isinstance(component, Panel):
                # Resolved once; the extent comes from the same placements
                pairs = list(component.get_widget_location_pairs())
                extent = self._extent(pairs)
                if extent == 0:
                    continue
                offset = self._panel_location(slot)
                for pair in pairs:
                    yield WidgetLocationPair(pair.widget, pair.location.add_offset(offset))
                slot += extent
