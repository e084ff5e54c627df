"""Inbound wire model: what the host reports after a user interaction."""

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ResultPayloadError
from ..core.json import JSONParseError, loads_object


class UIResults(BaseModel):
    """Flat result payload of one interaction round.

    Every value is addressed by the opaque key (dest var) of the widget that
    produced it.
    """

    values: dict[str, str] = Field(default_factory=dict)
    checked_items: dict[str, list[str]] = Field(default_factory=dict)
    expanded_items: dict[str, list[str]] = Field(default_factory=dict)
    trigger: str | None = Field(default=None, description="Key of the widget that ended the round")
    back: bool = Field(default=False)
    forward: bool = Field(default=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> "UIResults":
        """
        Decode a raw host payload.

        Raises:
            ResultPayloadError: If the payload is not a valid result object
        """
        try:
            return cls.model_validate(loads_object(data))
        except JSONParseError as e:
            raise ResultPayloadError(f"Result payload is not a JSON object: {e}") from e
        except PydanticValidationError as e:
            raise ResultPayloadError(f"Invalid result payload: {e}") from e

    def get_string(self, key: str) -> str | None:
        return self.values.get(key)

    def get_checked(self, key: str) -> bool:
        return (self.values.get(key) or "").strip().lower() == "true"

    def was_button_pressed(self, key: str) -> bool:
        return self.trigger == key

    def get_checked_item_keys(self, key: str) -> list[str]:
        return list(self.checked_items.get(key, []))

    def get_expanded_item_keys(self, key: str) -> list[str]:
        return list(self.expanded_items.get(key, []))

    def was_back(self) -> bool:
        return self.back

    def was_forward(self) -> bool:
        return self.forward
