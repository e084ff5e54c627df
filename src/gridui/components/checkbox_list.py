"""Multiple choice check box list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.exceptions import ValidationError
from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import OptionCheckedEvent
from .interactive import InteractiveWidget

# Separator of checked options in the result payload
OPTION_SEPARATOR = ";"


class CheckBoxList(InteractiveWidget):
    """
    A list of independently checkable options.

    ``changed`` fires once per toggled option, in option order.
    """

    block_type = BlockType.CHECK_BOX_LIST

    def __init__(
        self, options: Iterable[str] = (), checked: Iterable[str] = (), is_sorted: bool = False
    ) -> None:
        super().__init__()
        self._options: list[str] = []
        self._checked: set[str] = set()
        self.is_sorted = is_sorted
        for option in options:
            self.add_option(option)
        for option in checked:
            self.check(option)
        self.changed = self._hook("changed")

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    @property
    def checked(self) -> list[str]:
        """Checked options in option order."""
        return [option for option in self._options if option in self._checked]

    @property
    def unchecked(self) -> list[str]:
        return [option for option in self._options if option not in self._checked]

    def add_option(self, option: str) -> None:
        if OPTION_SEPARATOR in option:
            raise ValidationError(f"Option {option!r} cannot contain {OPTION_SEPARATOR!r}")
        if option not in self._options:
            self._options.append(option)

    def remove_option(self, option: str) -> None:
        if option in self._options:
            self._options.remove(option)
        self._checked.discard(option)

    def _require_option(self, option: str) -> None:
        if option not in self._options:
            raise ValidationError(f"{option!r} is not one of the options")

    def check(self, option: str) -> None:
        self._require_option(option)
        self._checked.add(option)

    def uncheck(self, option: str) -> None:
        self._require_option(option)
        self._checked.discard(option)

    def check_all(self) -> None:
        self._checked = set(self._options)

    def uncheck_all(self) -> None:
        self._checked.clear()

    def _props(self) -> dict[str, Any]:
        return {"options": list(self._options), "checked": self.checked, "is_sorted": self.is_sorted}

    def _load_result(self, results: UIResults) -> Any | None:
        raw = results.get_string(self.dest_var)
        if raw is None:
            return None

        reported = {part for part in raw.split(OPTION_SEPARATOR) if part in self._options}
        toggled = tuple(
            (option, option in reported)
            for option in self._options
            if (option in reported) != (option in self._checked)
        )
        self._checked = reported
        return toggled or None

    def _raise(self, payload: Any) -> None:
        for option, is_checked in payload:
            self.changed.fire(OptionCheckedEvent(self, option, is_checked))
