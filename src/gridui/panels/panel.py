"""
Panel base: ownership of child components and coordinate resolution.

A panel resolves the absolute placement of every visible widget below it by
walking its children and translating nested panels by their own location.
Placements are recomputed on every call because visibility may change
between rounds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..components.base import Component
from ..components.interactive import InteractiveWidget
from ..components.widget import Widget
from ..core import get_logger
from ..core.exceptions import CompositionError
from ..core.id import ComponentID, new_component_id
from ..layout.location import PanelLocation, WidgetLocationPair

logger = get_logger(__name__)

ORIGIN = PanelLocation(0, 0)


class Panel(Component, ABC):
    """
    Container of widgets and nested panels.

    Row and column counts are derived from the current placements, never
    stored. A hidden panel resolves to nothing and has no extent.
    """

    def __init__(self) -> None:
        super().__init__()
        self.id: ComponentID = new_component_id()
        self.is_root = False

    # ------------------------------------------------------------------
    # Strategy hooks
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def children(self) -> tuple[Component, ...]:
        """Direct children in registration order."""

    @abstractmethod
    def _resolve(self) -> Iterator[WidgetLocationPair]:
        """Placements of visible widgets, relative to this panel."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every child."""

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def get_widget_location_pairs(
        self, origin: PanelLocation = ORIGIN
    ) -> Iterator[WidgetLocationPair]:
        """
        Absolute placements of every visible widget below this panel.

        Args:
            origin: Location of this panel inside the outermost grid

        Yields:
            Widget/location pairs, depth first in registration order
        """
        if not self.is_visible:
            return
        for pair in self._resolve():
            yield WidgetLocationPair(pair.widget, pair.location.add_offset(origin))

    @property
    def row_count(self) -> int:
        return max((pair.location.end_row for pair in self.get_widget_location_pairs()), default=0)

    @property
    def column_count(self) -> int:
        return max(
            (pair.location.end_column for pair in self.get_widget_location_pairs()), default=0
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, component: Component) -> bool:
        return component.parent is self

    def get_widgets(self, include_nested: bool = True) -> list[Widget]:
        """All widgets, visible or not."""
        widgets: list[Widget] = []
        for child in self.children:
            if isinstance(child, Widget):
                widgets.append(child)
            elif include_nested and isinstance(child, Panel):
                widgets.extend(child.get_widgets(include_nested=True))
        return widgets

    def get_interactive_widgets(self, include_nested: bool = True) -> list[InteractiveWidget]:
        return [
            widget
            for widget in self.get_widgets(include_nested)
            if isinstance(widget, InteractiveWidget)
        ]

    def get_panels(self, include_nested: bool = True) -> list[Panel]:
        panels: list[Panel] = []
        for child in self.children:
            if isinstance(child, Panel):
                panels.append(child)
                if include_nested:
                    panels.extend(child.get_panels(include_nested=True))
        return panels

    # ------------------------------------------------------------------
    # Bulk state
    # ------------------------------------------------------------------

    def show_widgets(self, include_nested: bool = True) -> None:
        for widget in self.get_widgets(include_nested):
            widget.is_visible = True

    def hide_widgets(self, include_nested: bool = True) -> None:
        for widget in self.get_widgets(include_nested):
            widget.is_visible = False

    def enable_widgets(self, include_nested: bool = True) -> None:
        for widget in self.get_interactive_widgets(include_nested):
            widget.is_enabled = True

    def disable_widgets(self, include_nested: bool = True) -> None:
        for widget in self.get_interactive_widgets(include_nested):
            widget.is_enabled = False

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def _reject(self, reason: str) -> CompositionError:
        logger.warning("composition_rejected", panel=self.id, reason=reason)
        return CompositionError(reason)

    def _check_adoptable(self, component: Component) -> None:
        """
        Raises:
            CompositionError: If adding ``component`` would break the tree
        """
        if component is self:
            raise self._reject("Cannot add a panel to itself")
        if component.parent is not None:
            raise self._reject(f"{type(component).__name__} already has a parent")
        if isinstance(component, Panel):
            if component.is_root:
                raise self._reject("A dialog cannot be added to a panel")
            if any(ancestor is component for ancestor in self.ancestors):
                raise self._reject("Cannot add a panel to one of its descendants")

    def _adopt(self, component: Component) -> None:
        self._check_adoptable(component)
        component._parent = self

    def _release(self, component: Component) -> None:
        component._parent = None

    def _require_child(self, component: Component) -> None:
        if component.parent is not self:
            raise self._reject(f"{type(component).__name__} is not a child of this panel")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, children={len(self.children)})"
