"""Panel with caller supplied locations."""

from __future__ import annotations

from collections.abc import Iterator

from ..components.base import Component
from ..components.widget import Widget
from ..core.exceptions import ValidationError
from ..layout.location import PanelLocation, WidgetLocation, WidgetLocationPair
from .panel import Panel


class GridPanel(Panel):
    """
    Places each child at an explicit location.

    Widgets occupy a row/column span; nested panels only have a top-left
    location and extend over their own derived row/column count. Colliding
    locations are accepted here: only visible widgets that overlap at
    submission time are an error.
    """

    def __init__(self) -> None:
        super().__init__()
        self._locations: dict[Component, WidgetLocation | PanelLocation] = {}

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(self._locations)

    @staticmethod
    def _location_for(
        component: Component, row: int, column: int, row_span: int, column_span: int
    ) -> WidgetLocation | PanelLocation:
        if isinstance(component, Widget):
            return WidgetLocation(row, column, row_span, column_span)
        if row_span != 1 or column_span != 1:
            raise ValidationError("Panels cannot span rows or columns")
        return PanelLocation(row, column)

    def add(
        self, component: Component, row: int, column: int, row_span: int = 1, column_span: int = 1
    ) -> GridPanel:
        """
        Add a widget or panel at the given cell.

        Returns:
            This panel, so calls can be chained

        Raises:
            CompositionError: If the component already has a parent or would form a cycle
            ValidationError: If the location is invalid
        """
        location = self._location_for(component, row, column, row_span, column_span)
        self._adopt(component)
        self._locations[component] = location
        return self

    def add_at(self, component: Component, location: WidgetLocation | PanelLocation) -> GridPanel:
        if isinstance(location, WidgetLocation):
            return self.add(
                component, location.row, location.column, location.row_span, location.column_span
            )
        return self.add(component, location.row, location.column)

    def move(
        self, component: Component, row: int, column: int, row_span: int = 1, column_span: int = 1
    ) -> None:
        self._require_child(component)
        self._locations[component] = self._location_for(
            component, row, column, row_span, column_span
        )

    def move_to(self, component: Component, location: WidgetLocation | PanelLocation) -> None:
        if isinstance(location, WidgetLocation):
            self.move(
                component, location.row, location.column, location.row_span, location.column_span
            )
        else:
            self.move(component, location.row, location.column)

    def remove(self, component: Component) -> None:
        self._require_child(component)
        del self._locations[component]
        self._release(component)

    def get_location(self, component: Component) -> WidgetLocation | PanelLocation:
        self._require_child(component)
        return self._locations[component]

    def clear(self) -> None:
        for component in self._locations:
            self._release(component)
        self._locations.clear()

    def _resolve(self) -> Iterator[WidgetLocationPair]:
        for component, location in list(self._locations.items()):
            if isinstance(component, Widget):
                if component.is_visible:
                    yield WidgetLocationPair(component, location)
            elif isinstance(component, Panel):
                origin = PanelLocation(location.row, location.column)
                yield from component.get_widget_location_pairs(origin)
