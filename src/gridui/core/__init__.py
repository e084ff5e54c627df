"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .exceptions import (
    GridUIError,
    CompositionError,
    TreeViewDuplicateItemsError,
    ValidationError,
    OverlappingWidgetsError,
    ControllerStateError,
    HostError,
    ResultPayloadError,
)
from .validate import (
    AUTO,
    MAX_DIMENSION,
    DescriptionValidator,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import loads_object, safe_json_dumps, dumps_bytes, JSONParseError
from .id import (
    ComponentID,
    WidgetID,
    NodeKey,
    new_component_id,
    new_widget_id,
    new_node_key,
)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "GridUIError",
    "CompositionError",
    "TreeViewDuplicateItemsError",
    "ValidationError",
    "OverlappingWidgetsError",
    "ControllerStateError",
    "HostError",
    "ResultPayloadError",
    # Validation
    "AUTO",
    "MAX_DIMENSION",
    "DescriptionValidator",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "loads_object",
    "safe_json_dumps",
    "dumps_bytes",
    "JSONParseError",
    # IDs
    "ComponentID",
    "WidgetID",
    "NodeKey",
    "new_component_id",
    "new_widget_id",
    "new_node_key",
]
