"""Free text input widgets."""

from typing import Any

from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import ValueChangedEvent
from .interactive import InteractiveWidget


class _TextInput(InteractiveWidget):
    """Shared value handling of text and password boxes."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text
        self.changed = self._hook("changed")

    def _load_result(self, results: UIResults) -> Any | None:
        value = results.get_string(self.dest_var)
        if value is None or value == self.text:
            return None

        previous, self.text = self.text, value
        return value, previous

    def _raise(self, payload: Any) -> None:
        value, previous = payload
        self.changed.fire(ValueChangedEvent(self, value, previous))


class TextBox(_TextInput):
    block_type = BlockType.TEXT_BOX

    def __init__(self, text: str = "", is_multiline: bool = False, placeholder: str = "") -> None:
        super().__init__(text)
        self.is_multiline = is_multiline
        self.placeholder = placeholder

    def _props(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "is_multiline": self.is_multiline,
            "placeholder": self.placeholder,
        }


class PasswordBox(_TextInput):
    """Masked text input; the value never appears in ``repr``."""

    block_type = BlockType.PASSWORD_BOX

    def __init__(self, password: str = "", has_peek_icon: bool = True) -> None:
        super().__init__(password)
        self.has_peek_icon = has_peek_icon

    @property
    def password(self) -> str:
        return self.text

    @password.setter
    def password(self, value: str) -> None:
        self.text = value

    def _props(self) -> dict[str, Any]:
        return {"text": self.text, "has_peek_icon": self.has_peek_icon}
