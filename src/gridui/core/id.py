"""ID Generation System.

ULID-based opaque identifiers for everything the host needs to address.

Features:
- ULIDs: Lexicographically sortable, timestamp-based
- Type-safe: NewType wrappers for different ID categories
- Prefixed: Type-specific prefixes for debugging (cmp_*, wgt_*, node_*)

Design:
- Widget IDs double as the key the host uses to report results back
- Node keys only need to be unique within one tree view
- IDs are stable for the lifetime of the object that owns them
"""

from typing import NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

ComponentID = NewType("ComponentID", str)
"""Panel identifier"""

WidgetID = NewType("WidgetID", str)
"""Widget identifier, also the result key of interactive widgets"""

NodeKey = NewType("NodeKey", str)
"""Tree view node key"""

# ============================================================================
# ID Prefixes (for debugging and type identification)
# ============================================================================


class Prefix:
    """ID prefix constants."""

    COMPONENT = "cmp"
    WIDGET = "wgt"
    NODE = "node"


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


# Singleton instance
_generator = Generator()

# ============================================================================
# Typed ID Generators
# ============================================================================


def new_component_id() -> ComponentID:
    """Generate new panel ID."""
    return ComponentID(_generator.generate_with_prefix(Prefix.COMPONENT))


def new_widget_id() -> WidgetID:
    """Generate new widget ID."""
    return WidgetID(_generator.generate_with_prefix(Prefix.WIDGET))


def new_node_key() -> NodeKey:
    """Generate new tree node key."""
    return NodeKey(_generator.generate_with_prefix(Prefix.NODE))


