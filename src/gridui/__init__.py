"""
gridui - compose grid dialogs, show them through a rendering host and turn
the host's answers into ordered change notifications.
"""

from .core import (
    Settings,
    get_settings,
    configure_logging,
    get_logger,
    GridUIError,
    CompositionError,
    TreeViewDuplicateItemsError,
    ValidationError,
    OverlappingWidgetsError,
    ControllerStateError,
    HostError,
    ResultPayloadError,
)
from .layout import (
    PanelLocation,
    WidgetLocation,
    WidgetLocationPair,
    Margin,
    HorizontalAlignment,
    VerticalAlignment,
    Direction,
    Overlap,
    find_overlaps,
    validate_layout,
)
from .components import (
    Component,
    Widget,
    InteractiveWidget,
    Label,
    WhiteSpace,
    Button,
    CheckBox,
    CheckBoxList,
    TextBox,
    PasswordBox,
    Numeric,
    DropDown,
    RadioButtonList,
    DateTimePicker,
    CollapseButton,
    TreeView,
    TreeViewNode,
    TreeViewNodeStyle,
)
from .panels import Panel, GridPanel, StackPanel
from .dialogs import Dialog, ProgressDialog, MessageDialog, ExceptionDialog
from .models import BlockType, BlockDefinition, GridDescription, UIResults
from .clients import Host, HttpHost, ScriptedHost
from .controller import InteractiveController

__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Errors
    "GridUIError",
    "CompositionError",
    "TreeViewDuplicateItemsError",
    "ValidationError",
    "OverlappingWidgetsError",
    "ControllerStateError",
    "HostError",
    "ResultPayloadError",
    # Layout
    "PanelLocation",
    "WidgetLocation",
    "WidgetLocationPair",
    "Margin",
    "HorizontalAlignment",
    "VerticalAlignment",
    "Direction",
    "Overlap",
    "find_overlaps",
    "validate_layout",
    # Components
    "Component",
    "Widget",
    "InteractiveWidget",
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
    # Panels and dialogs
    "Panel",
    "GridPanel",
    "StackPanel",
    "Dialog",
    "ProgressDialog",
    "MessageDialog",
    "ExceptionDialog",
    # Wire models
    "BlockType",
    "BlockDefinition",
    "GridDescription",
    "UIResults",
    # Host
    "Host",
    "HttpHost",
    "ScriptedHost",
    "InteractiveController",
]
