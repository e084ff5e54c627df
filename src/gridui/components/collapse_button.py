"""Button that shows and hides a linked group of components."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ..core.exceptions import CompositionError
from ..core.validate import check_not_blank
from ..models.blocks import BlockType
from ..models.results import UIResults
from .base import Component
from .events import PressedEvent
from .interactive import InteractiveWidget


class CollapseButton(InteractiveWidget):
    """
    Toggles the visibility of its linked components.

    Linked components may be widgets, panels or other collapse buttons. A
    nested collapse button takes its own linked components along when the
    outer one collapses, but keeps them hidden on expand while it is itself
    collapsed.

    The host must always report a press, so the button always wants
    notifications.
    """

    block_type = BlockType.BUTTON
    notifies_always = True

    def __init__(
        self,
        linked: Iterable[Component] = (),
        is_collapsed: bool = False,
        collapse_text: str = "Collapse",
        expand_text: str = "Expand",
    ) -> None:
        super().__init__()
        self._linked: list[Component] = []
        self._collapse_text = check_not_blank(collapse_text, "collapse_text")
        self._expand_text = check_not_blank(expand_text, "expand_text")
        for component in linked:
            self.link(component)
        self._is_collapsed = False
        self.is_collapsed = is_collapsed
        self.pressed = self._hook("pressed")

    @property
    def linked(self) -> tuple[Component, ...]:
        return tuple(self._linked)

    def link(self, component: Component) -> None:
        """Link a component; it immediately follows the button's state."""
        if component is self:
            raise CompositionError("A collapse button cannot be linked to itself")
        if component not in self._linked:
            self._linked.append(component)

    def unlink(self, component: Component) -> None:
        if component in self._linked:
            self._linked.remove(component)

    @property
    def collapse_text(self) -> str:
        return self._collapse_text

    @collapse_text.setter
    def collapse_text(self, value: str) -> None:
        self._collapse_text = check_not_blank(value, "collapse_text")

    @property
    def expand_text(self) -> str:
        return self._expand_text

    @expand_text.setter
    def expand_text(self, value: str) -> None:
        self._expand_text = check_not_blank(value, "expand_text")

    @property
    def text(self) -> str:
        return self._expand_text if self._is_collapsed else self._collapse_text

    @property
    def is_collapsed(self) -> bool:
        return self._is_collapsed

    @is_collapsed.setter
    def is_collapsed(self, value: bool) -> None:
        self._is_collapsed = value
        for component in self.affected_components(value):
            component.is_visible = not value

    def collapse(self) -> None:
        self.is_collapsed = True

    def expand(self) -> None:
        self.is_collapsed = False

    def affected_components(self, collapsing: bool) -> list[Component]:
        """
        Components whose visibility follows a toggle in the given direction.

        Collapsing always descends into nested collapse buttons. Expanding
        only descends into nested buttons that are expanded themselves.
        """
        return list(self._walk_affected(collapsing, {id(self)}))

    def _walk_affected(self, collapsing: bool, seen: set[int]) -> Iterator[Component]:
        for component in self._linked:
            if id(component) in seen:
                continue
            seen.add(id(component))
            yield component
            if isinstance(component, CollapseButton) and (collapsing or not component.is_collapsed):
                yield from component._walk_affected(collapsing, seen)

    def _props(self) -> dict[str, Any]:
        return {"text": self.text}

    def _load_result(self, results: UIResults) -> Any | None:
        if not results.was_button_pressed(self.dest_var):
            return None
        self.is_collapsed = not self._is_collapsed
        return True

    def _raise(self, payload: Any) -> None:
        self.pressed.fire(PressedEvent(self))
