"""Outbound wire models: what the rendering host is asked to draw."""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


class BlockType(str, Enum):
    """Kinds of blocks the host knows how to render."""

    UNDEFINED = "Undefined"
    LABEL = "Label"
    STATIC_TEXT = "StaticText"
    BUTTON = "Button"
    CHECK_BOX = "CheckBox"
    CHECK_BOX_LIST = "CheckBoxList"
    TEXT_BOX = "TextBox"
    PASSWORD_BOX = "PasswordBox"
    NUMERIC = "Numeric"
    DROP_DOWN = "DropDown"
    RADIO_BUTTON_LIST = "RadioButtonList"
    CALENDAR = "Calendar"
    TREE_VIEW = "TreeView"


class BlockDefinition(BaseModel):
    """One widget, placed on the dialog grid."""

    type: BlockType = Field(..., description="Block type")
    dest_var: str | None = Field(default=None, description="Result key of interactive widgets")

    # Placement
    row: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)
    row_span: int = Field(default=1, ge=1)
    column_span: int = Field(default=1, ge=1)
    horizontal_alignment: str = Field(default="Left")
    vertical_alignment: str = Field(default="Center")
    margin: str = Field(default="4;4;4;4", description="left;top;right;bottom")

    # Box (-1 = auto)
    width: int = Field(default=-1)
    height: int = Field(default=-1)
    min_width: int = Field(default=-1)
    min_height: int = Field(default=-1)
    max_width: int = Field(default=-1)
    max_height: int = Field(default=-1)

    # Interaction
    is_enabled: bool = Field(default=True)
    wants_on_change: bool = Field(default=False)

    props: dict[str, Any] = Field(default_factory=dict, description="Widget specific description")


class GridDescription(BaseModel):
    """Complete dialog handed to the host for one round."""

    title: str = Field(default="Dialog")
    width: int = Field(default=-1)
    height: int = Field(default=-1)
    min_width: int = Field(default=1)
    min_height: int = Field(default=1)
    max_width: int = Field(default=2**31 - 1)
    max_height: int = Field(default=2**31 - 1)
    row_defs: str = Field(default="", description="';'-joined row sizes")
    column_defs: str = Field(default="", description="';'-joined column sizes")
    require_response: bool = Field(default=True)
    blocks: list[BlockDefinition] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.row_defs.split(";")) if self.row_defs else 0

    @property
    def column_count(self) -> int:
        return len(self.column_defs.split(";")) if self.column_defs else 0

    def find_block(self, dest_var: str) -> BlockDefinition | None:
        """Look up the block of an interactive widget by its result key."""
        for block in self.blocks:
            if block.dest_var == dest_var:
                return block
        return None
