"""
Panels: grid and stack composition of widgets.
"""

from .panel import Panel
from .grid import GridPanel
from .stack import StackPanel

__all__ = [
    "Panel",
    "GridPanel",
    "StackPanel",
]
