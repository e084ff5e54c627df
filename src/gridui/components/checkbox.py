"""Single check box."""

from typing import Any

from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import CheckedChangedEvent
from .interactive import InteractiveWidget


class CheckBox(InteractiveWidget):
    """
    A check box with a caption.

    ``changed`` fires on every toggle; ``checked`` / ``unchecked`` only for
    the matching direction.
    """

    block_type = BlockType.CHECK_BOX

    def __init__(self, text: str = "", is_checked: bool = False) -> None:
        super().__init__()
        self.text = text
        self.is_checked = is_checked
        self.changed = self._hook("changed")
        self.checked = self._hook("checked")
        self.unchecked = self._hook("unchecked")

    def _props(self) -> dict[str, Any]:
        return {"text": self.text, "is_checked": self.is_checked}

    def _load_result(self, results: UIResults) -> Any | None:
        if results.get_string(self.dest_var) is None:
            return None

        is_checked = results.get_checked(self.dest_var)
        changed = is_checked != self.is_checked
        self.is_checked = is_checked
        return is_checked if changed else None

    def _raise(self, payload: Any) -> None:
        event = CheckedChangedEvent(self, payload)
        self.changed.fire(event)
        if payload:
            self.checked.fire(event)
        else:
            self.unchecked.fire(event)
