"""Alignment, margin and stacking direction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import ValidationError
from ..core.validate import check_non_negative


class HorizontalAlignment(str, Enum):
    """Horizontal placement of a widget inside its cells."""

    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"
    STRETCH = "Stretch"


class VerticalAlignment(str, Enum):
    """Vertical placement of a widget inside its cells."""

    TOP = "Top"
    CENTER = "Center"
    BOTTOM = "Bottom"
    STRETCH = "Stretch"


class Direction(str, Enum):
    """Axis along which a stack panel places its children."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Margin:
    """Space around a widget, in pixels."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def __post_init__(self) -> None:
        check_non_negative(self.left, "left margin")
        check_non_negative(self.top, "top margin")
        check_non_negative(self.right, "right margin")
        check_non_negative(self.bottom, "bottom margin")

    @classmethod
    def uniform(cls, all_sides: int) -> Margin:
        return cls(all_sides, all_sides, all_sides, all_sides)

    @classmethod
    def symmetric(cls, left_right: int, top_bottom: int) -> Margin:
        return cls(left_right, top_bottom, left_right, top_bottom)

    @classmethod
    def parse(cls, text: str | None) -> Margin:
        """
        Parse the wire format "left;top;right;bottom".

        Empty text means no margin.

        Raises:
            ValidationError: If the text is malformed or holds negative values
        """
        if text is None or not text.strip():
            return cls()

        parts = text.split(";")
        if len(parts) != 4:
            raise ValidationError("Margin should have the following format: left;top;right;bottom")

        try:
            left, top, right, bottom = (int(part) for part in parts)
        except ValueError as e:
            raise ValidationError(f"Margin is not a number: {text!r}") from e

        return cls(left, top, right, bottom)

    def __str__(self) -> str:
        return f"{self.left};{self.top};{self.right};{self.bottom}"


DEFAULT_MARGIN = Margin.uniform(4)
