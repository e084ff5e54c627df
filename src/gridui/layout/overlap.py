"""Detection of visible widgets that share grid cells."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable
from returns.result import Result, Success, Failure

from ..core import get_logger
from ..core.exceptions import OverlappingWidgetsError
from .location import WidgetLocationPair

logger = get_logger(__name__)


@dataclass(frozen=True)
class Overlap:
    """Two placements whose rectangles intersect."""

    first: WidgetLocationPair
    second: WidgetLocationPair

    def describe(self) -> str:
        return (
            f"{type(self.first.widget).__name__} at {self.first.location} overlaps "
            f"{type(self.second.widget).__name__} at {self.second.location}"
        )


def find_overlaps(pairs: Iterable[WidgetLocationPair]) -> list[Overlap]:
    """
    Find every pair of placements whose rectangles intersect.

    Pairwise comparison, so three widgets stacked on one cell yield three
    overlaps. Pairs are reported in input order.

    Args:
        pairs: Resolved placements of visible widgets

    Returns:
        All overlapping pairs (empty when the layout is clean)
    """
    placed = list(pairs)
    overlaps = []
    for i, first in enumerate(placed):
        for second in placed[i + 1:]:
            if first.location.overlaps(second.location):
                overlaps.append(Overlap(first, second))
    return overlaps


def check_overlaps(pairs: Iterable[WidgetLocationPair]) -> None:
    """
    Raise when any placements overlap.

    Raises:
        OverlappingWidgetsError: Listing every overlapping pair
    """
    overlaps = find_overlaps(pairs)
    if overlaps:
        logger.warning("overlapping_widgets", count=len(overlaps))
        raise OverlappingWidgetsError(overlaps)


def validate_layout(pairs: Iterable[WidgetLocationPair]) -> Result[None, list[Overlap]]:
    """
    Check placements for overlaps (Result pattern version).

    Returns:
        Success(None) or Failure with every overlapping pair
    """
    overlaps = find_overlaps(pairs)
    if overlaps:
        return Failure(overlaps)
    return Success(None)
