"""Widget base: box, alignment, margin and visibility."""

from __future__ import annotations

from typing import Any

from ..core.id import WidgetID, new_widget_id
from ..core.validate import AUTO, check_min_max, check_positive, check_size_bound
from ..layout.location import WidgetLocation
from ..layout.style import DEFAULT_MARGIN, HorizontalAlignment, Margin, VerticalAlignment
from ..models.blocks import BlockDefinition, BlockType
from .base import Component


class Widget(Component):
    """
    A single positionable element.

    Sizes use -1 for "auto". A widget never knows its own location: the panel
    that owns it decides where it goes.
    """

    block_type: BlockType = BlockType.UNDEFINED

    def __init__(self) -> None:
        super().__init__()
        self._id = new_widget_id()
        self._width = AUTO
        self._height = AUTO
        self._min_width = AUTO
        self._min_height = AUTO
        self._max_width = AUTO
        self._max_height = AUTO
        self.margin = DEFAULT_MARGIN
        self.horizontal_alignment = HorizontalAlignment.LEFT
        self.vertical_alignment = VerticalAlignment.CENTER

    @property
    def id(self) -> WidgetID:
        return self._id

    # ------------------------------------------------------------------
    # Box
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = check_positive(value, "width")

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = check_positive(value, "height")

    @property
    def min_width(self) -> int:
        return self._min_width

    @min_width.setter
    def min_width(self, value: int) -> None:
        check_size_bound(value, "min_width")
        check_min_max(value, self._max_width, "width")
        self._min_width = value

    @property
    def max_width(self) -> int:
        return self._max_width

    @max_width.setter
    def max_width(self, value: int) -> None:
        check_size_bound(value, "max_width")
        check_min_max(self._min_width, value, "width")
        self._max_width = value

    @property
    def min_height(self) -> int:
        return self._min_height

    @min_height.setter
    def min_height(self, value: int) -> None:
        check_size_bound(value, "min_height")
        check_min_max(value, self._max_height, "height")
        self._min_height = value

    @property
    def max_height(self) -> int:
        return self._max_height

    @max_height.setter
    def max_height(self, value: int) -> None:
        check_size_bound(value, "max_height")
        check_min_max(self._min_height, value, "height")
        self._max_height = value

    def set_width_auto(self) -> None:
        self._width = self._min_width = self._max_width = AUTO

    def set_height_auto(self) -> None:
        self._height = self._min_height = self._max_height = AUTO

    # ------------------------------------------------------------------
    # Alignment and margin
    # ------------------------------------------------------------------

    @property
    def horizontal_alignment(self) -> HorizontalAlignment:
        return self._horizontal_alignment

    @horizontal_alignment.setter
    def horizontal_alignment(self, value: HorizontalAlignment | str) -> None:
        self._horizontal_alignment = HorizontalAlignment(value)

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        return self._vertical_alignment

    @vertical_alignment.setter
    def vertical_alignment(self, value: VerticalAlignment | str) -> None:
        self._vertical_alignment = VerticalAlignment(value)

    @property
    def margin(self) -> Margin:
        return self._margin

    @margin.setter
    def margin(self, value: Margin | str) -> None:
        self._margin = value if isinstance(value, Margin) else Margin.parse(value)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _props(self) -> dict[str, Any]:
        """Type specific part of the rendering description."""
        return {}

    def to_block(self, location: WidgetLocation) -> BlockDefinition:
        """Describe this widget at a resolved location."""
        return BlockDefinition(
            type=self.block_type,
            row=location.row,
            column=location.column,
            row_span=location.row_span,
            column_span=location.column_span,
            horizontal_alignment=self.horizontal_alignment.value,
            vertical_alignment=self.vertical_alignment.value,
            margin=str(self.margin),
            width=self._width,
            height=self._height,
            min_width=self._min_width,
            min_height=self._min_height,
            max_width=self._max_width,
            max_height=self._max_height,
            props=self._props(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, visible={self.is_visible})"
