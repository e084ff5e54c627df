"""
Widgets and the interactive update contract.
"""

from .base import Component
from .events import (
    EventHook,
    PendingChange,
    DialogEvent,
    PressedEvent,
    CheckedChangedEvent,
    ValueChangedEvent,
    OptionCheckedEvent,
    DateTimeChangedEvent,
    TreeViewChangedEvent,
    TreeViewNodesEvent,
)
from .widget import Widget
from .interactive import InteractiveWidget
from .label import Label, WhiteSpace
from .button import Button
from .checkbox import CheckBox
from .checkbox_list import CheckBoxList
from .textbox import TextBox, PasswordBox
from .numeric import Numeric
from .selection import DropDown, RadioButtonList
from .datetime_picker import DateTimePicker
from .collapse_button import CollapseButton
from .tree_view import TreeView, TreeViewNode, TreeViewNodeStyle, find_node_that_caused_change

__all__ = [
    # Base
    "Component",
    "Widget",
    "InteractiveWidget",
    # Events
    "EventHook",
    "PendingChange",
    "DialogEvent",
    "PressedEvent",
    "CheckedChangedEvent",
    "ValueChangedEvent",
    "OptionCheckedEvent",
    "DateTimeChangedEvent",
    "TreeViewChangedEvent",
    "TreeViewNodesEvent",
    # Widgets
    "Label",
    "WhiteSpace",
    "Button",
    "CheckBox",
    "CheckBoxList",
    "TextBox",
    "PasswordBox",
    "Numeric",
    "DropDown",
    "RadioButtonList",
    "DateTimePicker",
    "CollapseButton",
    "TreeView",
    "TreeViewNode",
    "TreeViewNodeStyle",
    "find_node_that_caused_change",
]
