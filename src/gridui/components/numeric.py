"""Numeric up/down input."""

import sys
from typing import Any

from ..core.exceptions import ValidationError
from ..core.validate import check_finite, check_non_negative
from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import ValueChangedEvent
from .interactive import InteractiveWidget


class Numeric(InteractiveWidget):
    """
    A number clipped to ``[minimum, maximum]``.

    Two values count as equal when they differ by less than
    ``10 ** -decimals``, so a host echoing a rounded value is not a change.
    """

    block_type = BlockType.NUMERIC

    def __init__(
        self,
        value: float = 0.0,
        minimum: float = -sys.float_info.max,
        maximum: float = sys.float_info.max,
        decimals: int = 0,
        step_size: float = 1.0,
    ) -> None:
        super().__init__()
        check_finite(minimum, "minimum")
        check_finite(maximum, "maximum")
        if minimum > maximum:
            raise ValidationError("Minimum can't be larger than Maximum")
        self._minimum = minimum
        self._maximum = maximum
        self.decimals = decimals
        self.step_size = step_size
        self._value = self._clip(check_finite(value, "value"))
        self.changed = self._hook("changed")

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = self._clip(check_finite(value, "value"))

    @property
    def minimum(self) -> float:
        return self._minimum

    @minimum.setter
    def minimum(self, value: float) -> None:
        check_finite(value, "minimum")
        if value > self._maximum:
            raise ValidationError("Minimum can't be larger than Maximum")
        self._minimum = value
        self._value = self._clip(self._value)

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, value: float) -> None:
        check_finite(value, "maximum")
        if value < self._minimum:
            raise ValidationError("Maximum can't be smaller than Minimum")
        self._maximum = value
        self._value = self._clip(self._value)

    @property
    def decimals(self) -> int:
        return self._decimals

    @decimals.setter
    def decimals(self, value: int) -> None:
        self._decimals = check_non_negative(value, "decimals")

    @property
    def step_size(self) -> float:
        return self._step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        check_finite(value, "step_size")
        if value <= 0:
            raise ValidationError(f"step_size must be greater than 0, got {value}")
        self._step_size = value

    def _clip(self, number: float) -> float:
        return max(self._minimum, min(self._maximum, number))

    def is_equal_within_decimals(self, a: float, b: float) -> bool:
        return abs(a - b) < 10 ** -self._decimals

    def _props(self) -> dict[str, Any]:
        return {
            "value": self._value,
            "minimum": self._minimum,
            "maximum": self._maximum,
            "decimals": self._decimals,
            "step_size": self._step_size,
        }

    def _load_result(self, results: UIResults) -> Any | None:
        raw = results.get_string(self.dest_var)
        if raw is None:
            return None

        try:
            number = float(raw)
            check_finite(number, "value")
        except ValueError:
            # Unparseable input keeps the previous value
            return None

        previous = self._value
        self._value = self._clip(number)
        if self.is_equal_within_decimals(self._value, previous):
            return None
        return self._value, previous

    def _raise(self, payload: Any) -> None:
        value, previous = payload
        self.changed.fire(ValueChangedEvent(self, value, previous))
