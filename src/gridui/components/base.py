"""Common base of widgets and panels."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..panels.panel import Panel


class Component:
    """
    Anything that can be placed inside a panel.

    The parent link is owned by the panels: it is set when a component is
    added and cleared when it is removed, so a component belongs to at most
    one panel at a time.
    """

    def __init__(self) -> None:
        self._parent: Panel | None = None
        self.is_visible = True

    @property
    def parent(self) -> Panel | None:
        return self._parent

    @property
    def ancestors(self) -> Iterator[Panel]:
        """Parents from the closest up to the root."""
        current = self._parent
        while current is not None:
            yield current
            current = current.parent
