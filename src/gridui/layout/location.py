"""Grid locations of widgets and panels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from ..core.validate import check_non_negative, check_positive

if TYPE_CHECKING:
    from ..components.widget import Widget


@dataclass(frozen=True)
class PanelLocation:
    """Top-left cell of a nested panel inside its parent's grid."""

    row: int
    column: int

    def __post_init__(self) -> None:
        check_non_negative(self.row, "row")
        check_non_negative(self.column, "column")

    def add_offset(self, offset: PanelLocation) -> PanelLocation:
        return PanelLocation(self.row + offset.row, self.column + offset.column)


@dataclass(frozen=True)
class WidgetLocation:
    """Rectangle of cells occupied by a widget."""

    row: int
    column: int
    row_span: int = 1
    column_span: int = 1

    def __post_init__(self) -> None:
        check_non_negative(self.row, "row")
        check_non_negative(self.column, "column")
        check_positive(self.row_span, "row_span")
        check_positive(self.column_span, "column_span")

    @property
    def end_row(self) -> int:
        """First row below the rectangle."""
        return self.row + self.row_span

    @property
    def end_column(self) -> int:
        """First column right of the rectangle."""
        return self.column + self.column_span

    def overlaps(self, other: WidgetLocation) -> bool:
        """Rectangles overlap when both their row and column ranges intersect."""
        rows_overlap = self.end_row > other.row and other.end_row > self.row
        columns_overlap = self.end_column > other.column and other.end_column > self.column
        return rows_overlap and columns_overlap

    def add_offset(self, offset: PanelLocation) -> WidgetLocation:
        return WidgetLocation(
            self.row + offset.row,
            self.column + offset.column,
            self.row_span,
            self.column_span,
        )

    def __str__(self) -> str:
        return (
            f"Row {self.row}, Column {self.column}, "
            f"RowSpan {self.row_span}, ColumnSpan {self.column_span}"
        )


class WidgetLocationPair(NamedTuple):
    """A widget together with its resolved location."""

    widget: Widget
    location: WidgetLocation
