"""Push button."""

from typing import Any

from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import PressedEvent
from .interactive import InteractiveWidget


class Button(InteractiveWidget):
    """A button; ``pressed`` fires when it ended the round."""

    block_type = BlockType.BUTTON

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text
        self.pressed = self._hook("pressed")

    def _props(self) -> dict[str, Any]:
        return {"text": self.text}

    def _load_result(self, results: UIResults) -> Any | None:
        return True if results.was_button_pressed(self.dest_var) else None

    def _raise(self, payload: Any) -> None:
        self.pressed.fire(PressedEvent(self))
