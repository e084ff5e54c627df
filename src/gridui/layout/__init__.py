"""Grid layout primitives."""

from .location import PanelLocation, WidgetLocation, WidgetLocationPair
from .style import (
    DEFAULT_MARGIN,
    Direction,
    HorizontalAlignment,
    Margin,
    VerticalAlignment,
)
from .overlap import Overlap, check_overlaps, find_overlaps, validate_layout

__all__ = [
    "PanelLocation",
    "WidgetLocation",
    "WidgetLocationPair",
    "DEFAULT_MARGIN",
    "Direction",
    "HorizontalAlignment",
    "Margin",
    "VerticalAlignment",
    "Overlap",
    "check_overlaps",
    "find_overlaps",
    "validate_layout",
]
