"""Property validation and limits for outgoing grid descriptions."""

import math
from typing import Any

from .exceptions import ValidationError
from .json import json_depth


# Validation limits
AUTO = -1  # "size to content" marker on the wire
MAX_DIMENSION = 2**31 - 1
MAX_DESCRIPTION_SIZE = 512 * 1024  # 512KB
MAX_DESCRIPTION_DEPTH = 32


def check_positive(value: int, name: str) -> int:
    """Fixed sizes must be strictly positive."""
    if value <= 0:
        raise ValidationError(f"{name} must be greater than 0, got {value}")
    return value


def check_non_negative(value: int, name: str) -> int:
    """Indices, offsets and margins cannot be negative."""
    if value < 0:
        raise ValidationError(f"{name} cannot be negative, got {value}")
    return value


def check_size_bound(value: int, name: str) -> int:
    """Min/max sizes accept -1 (auto) or a non-negative pixel count."""
    if value < AUTO:
        raise ValidationError(f"{name} must be -1 (auto) or at least 0, got {value}")
    return value


def check_min_max(minimum: int, maximum: int, name: str) -> None:
    """Bounds are only compared when both are set."""
    if minimum != AUTO and maximum != AUTO and minimum > maximum:
        raise ValidationError(f"min {name} ({minimum}) cannot exceed max {name} ({maximum})")


def check_finite(value: float, name: str) -> float:
    """Reject NaN and infinity."""
    if math.isnan(value):
        raise ValidationError(f"{name}: NaN is not allowed")
    if math.isinf(value):
        raise ValidationError(f"{name}: infinity is not allowed")
    return value


def check_not_blank(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{name} cannot be empty")
    return value


class DescriptionValidator:
    """Validates serialized grid descriptions before they go to the host."""

    @staticmethod
    def validate(
        description: dict[str, Any],
        description_json: str,
        max_size: int = MAX_DESCRIPTION_SIZE,
        max_depth: int = MAX_DESCRIPTION_DEPTH,
    ) -> None:
        """
        Validate a grid description.

        Args:
            description: Description as plain dictionary
            description_json: JSON string representation
            max_size: Maximum encoded size in bytes
            max_depth: Maximum nesting depth (tree views nest deeply)

        Raises:
            ValidationError: If validation fails
        """
        size = len(description_json.encode("utf-8"))
        if size > max_size:
            raise ValidationError(
                f"Grid description size {size} bytes exceeds maximum {max_size} bytes"
            )

        depth = json_depth(description)
        if depth > max_depth:
            raise ValidationError(
                f"Grid description nesting depth {depth} exceeds maximum {max_depth}"
            )

        if not isinstance(description.get("blocks"), list):
            raise ValidationError("Grid description 'blocks' must be a list")
