"""Date and time selection."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import DateTimeChangedEvent
from .interactive import InteractiveWidget


class DateTimePicker(InteractiveWidget):
    """A calendar; values travel as ISO-8601 strings."""

    block_type = BlockType.CALENDAR

    def __init__(self, value: datetime | None = None, has_time: bool = True) -> None:
        super().__init__()
        self.value = value if value is not None else datetime.now().replace(microsecond=0)
        self.has_time = has_time
        self.changed = self._hook("changed")

    def _props(self) -> dict[str, Any]:
        return {"value": self.value.isoformat(), "has_time": self.has_time}

    def _load_result(self, results: UIResults) -> Any | None:
        raw = results.get_string(self.dest_var)
        if raw is None:
            return None

        try:
            value = datetime.fromisoformat(raw)
        except ValueError:
            return None

        if value == self.value:
            return None
        previous, self.value = self.value, value
        return value, previous

    def _raise(self, payload: Any) -> None:
        value, previous = payload
        self.changed.fire(DateTimeChangedEvent(self, value, previous))
