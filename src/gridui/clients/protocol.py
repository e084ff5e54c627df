"""Interface of the rendering host."""

from typing import Protocol, runtime_checkable

from ..models.blocks import GridDescription
from ..models.results import UIResults


@runtime_checkable
class Host(Protocol):
    """
    Anything that can render a grid description.

    ``show_ui`` blocks until the user interacts when the description requires
    a response, and returns None right away when it does not.
    """

    def show_ui(self, description: GridDescription) -> UIResults | None: ...

    def show_progress(self, text: str) -> None: ...
