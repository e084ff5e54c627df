"""Single choice widgets: drop-down and radio button list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.exceptions import ValidationError
from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import ValueChangedEvent
from .interactive import InteractiveWidget


class _SingleSelection(InteractiveWidget):
    """
    A choice among an ordered set of options.

    The selection is either None or one of the options. Results naming an
    unknown option are ignored.
    """

    def __init__(self, options: Iterable[str] = (), selected: str | None = None) -> None:
        super().__init__()
        self._options: list[str] = []
        self._selected: str | None = None
        self.set_options(options)
        self.selected = selected
        self.changed = self._hook("changed")

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    def set_options(self, options: Iterable[str]) -> None:
        """Replace the options; a selection that disappears is reset."""
        self._options = list(dict.fromkeys(options))
        if self._selected not in self._options:
            self._selected = self._default_selection()

    def add_option(self, option: str) -> None:
        if option not in self._options:
            self._options.append(option)
        if self._selected is None:
            self._selected = self._default_selection()

    def remove_option(self, option: str) -> None:
        if option in self._options:
            self._options.remove(option)
        if self._selected == option:
            self._selected = self._default_selection()

    def _default_selection(self) -> str | None:
        return None

    @property
    def selected(self) -> str | None:
        return self._selected

    @selected.setter
    def selected(self, value: str | None) -> None:
        if value is None:
            self._selected = self._default_selection()
            return
        if value not in self._options:
            raise ValidationError(f"{value!r} is not one of the options")
        self._selected = value

    def _props(self) -> dict[str, Any]:
        return {"options": list(self._options), "selected": self._selected}

    def _load_result(self, results: UIResults) -> Any | None:
        value = results.get_string(self.dest_var)
        if value is None or value not in self._options or value == self._selected:
            return None

        previous, self._selected = self._selected, value
        return value, previous

    def _raise(self, payload: Any) -> None:
        value, previous = payload
        self.changed.fire(ValueChangedEvent(self, value, previous))


class DropDown(_SingleSelection):
    """
    Drop-down list. Unless a selection is given, the first option is
    selected, matching what the host displays.
    """

    block_type = BlockType.DROP_DOWN

    def __init__(
        self,
        options: Iterable[str] = (),
        selected: str | None = None,
        is_sorted: bool = False,
        is_display_filter_shown: bool = False,
    ) -> None:
        super().__init__(options, selected)
        self.is_sorted = is_sorted
        self.is_display_filter_shown = is_display_filter_shown

    def _default_selection(self) -> str | None:
        return self._options[0] if self._options else None

    def _props(self) -> dict[str, Any]:
        props = super()._props()
        props["is_sorted"] = self.is_sorted
        props["is_display_filter_shown"] = self.is_display_filter_shown
        return props


class RadioButtonList(_SingleSelection):
    """Radio buttons; nothing is selected until the user picks an option."""

    block_type = BlockType.RADIO_BUTTON_LIST

    def __init__(
        self, options: Iterable[str] = (), selected: str | None = None, is_sorted: bool = False
    ) -> None:
        super().__init__(options, selected)
        self.is_sorted = is_sorted

    def _props(self) -> dict[str, Any]:
        props = super()._props()
        props["is_sorted"] = self.is_sorted
        return props
