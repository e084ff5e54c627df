"""Exception hierarchy for dialog composition, layout and host round trips."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..layout.overlap import Overlap


class GridUIError(Exception):
    """Base class for all toolkit errors."""

    pass


class CompositionError(GridUIError):
    """A component tree mutation would break single ownership or create a cycle."""

    pass


class TreeViewDuplicateItemsError(CompositionError):
    """Two nodes in the same tree view share a key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"An item with key {key} is already present in the TreeView")
        self.key = key


class ValidationError(GridUIError, ValueError):
    """A widget, location or dialog property was given an invalid value."""

    pass


class OverlappingWidgetsError(GridUIError):
    """One or more pairs of visible widgets occupy the same grid cells."""

    def __init__(self, overlaps: list[Overlap]) -> None:
        self.overlaps = list(overlaps)
        lines = [f"{len(self.overlaps)} pair(s) of visible widgets overlap:"]
        for overlap in self.overlaps:
            lines.append(f"  - {overlap.describe()}")
        super().__init__("\n".join(lines))


class ControllerStateError(GridUIError, RuntimeError):
    """An interactive controller operation is not allowed in its current state."""

    pass


class HostError(GridUIError):
    """The rendering host round trip failed."""

    pass


class ResultPayloadError(HostError):
    """The host returned a result payload that could not be decoded."""

    pass
