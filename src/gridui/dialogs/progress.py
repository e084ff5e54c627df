"""Dialog that streams progress text while a script works."""

from __future__ import annotations

from ..clients.protocol import Host
from ..components.button import Button
from ..components.label import Label
from .dialog import Dialog


class ProgressDialog(Dialog):
    """
    Pushes accumulated progress text to the host without blocking.

    Call :meth:`finish` once the work is done to turn the text into a
    regular dialog with an OK button, then :meth:`show` it.
    """

    def __init__(self, host: Host, title: str = "Progress") -> None:
        super().__init__(host, title)
        self._progress: list[str] = []
        self.progress_label = Label()
        self.ok_button = Button("OK")
        self.ok_button.width = 150

    @property
    def progress(self) -> str:
        return "".join(self._progress)

    def _push(self) -> None:
        self.host.show_progress(self.progress)

    def set_progress(self, text: str) -> None:
        self._progress = [text, "\n"]
        self._push()

    def add_progress(self, text: str) -> None:
        self._progress.append(text)
        self._push()

    def add_progress_line(self, text: str) -> None:
        self._progress.extend((text, "\n"))
        self._push()

    def clear_progress(self) -> None:
        self._progress = []
        self._push()

    def finish(self) -> None:
        """Place the final text and the OK button; safe to call repeatedly."""
        self.progress_label.text = self.progress
        if self.progress_label.parent is None:
            self.add(self.progress_label, 0, 0)
        if self.ok_button.parent is None:
            self.add(self.ok_button, 1, 0)
