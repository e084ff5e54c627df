"""Non-interactive text widgets."""

from typing import Any

from ..models.blocks import BlockType
from .widget import Widget


class Label(Widget):
    """Read-only text."""

    block_type = BlockType.LABEL

    def __init__(self, text: str = "", is_bold: bool = False) -> None:
        super().__init__()
        self.text = text
        self.is_bold = is_bold

    def _props(self) -> dict[str, Any]:
        return {"text": self.text, "is_bold": self.is_bold}


class WhiteSpace(Widget):
    """Empty filler, used to reserve a cell."""

    block_type = BlockType.STATIC_TEXT

    def _props(self) -> dict[str, Any]:
        return {"text": ""}
