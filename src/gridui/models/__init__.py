"""
Wire models exchanged with the rendering host.
"""

from .blocks import BlockType, BlockDefinition, GridDescription
from .results import UIResults

__all__ = [
    "BlockType",
    "BlockDefinition",
    "GridDescription",
    "UIResults",
]
