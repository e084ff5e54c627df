"""Ready-made dialogs with a text and an OK button."""

from __future__ import annotations

import traceback

from ..clients.protocol import Host
from ..components.button import Button
from ..components.label import Label
from .dialog import Dialog


class MessageDialog(Dialog):
    """A message with an OK button below it."""

    def __init__(self, host: Host, message: str = "", title: str = "Dialog") -> None:
        super().__init__(host, title)
        self.message_label = Label(message)
        self.ok_button = Button("OK")
        self.ok_button.width = 150
        self.add(self.message_label, 0, 0)
        self.add(self.ok_button, 1, 0)

    @property
    def message(self) -> str:
        return self.message_label.text

    @message.setter
    def message(self, value: str) -> None:
        self.message_label.text = value


class ExceptionDialog(MessageDialog):
    """Shows an exception with its traceback."""

    def __init__(self, host: Host, exception: BaseException | None = None) -> None:
        super().__init__(host, title="Exception Occurred")
        self._exception: BaseException | None = None
        if exception is not None:
            self.exception = exception

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @exception.setter
    def exception(self, value: BaseException) -> None:
        self._exception = value
        self.message = "".join(traceback.format_exception(type(value), value, value.__traceback__))
