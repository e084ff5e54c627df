"""Fast JSON encoding and decoding for the host wire format."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def loads_object(data: str | bytes) -> dict[str, Any]:
    """
    Decode a JSON object received from the host.

    Args:
        data: JSON text or bytes

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If the payload is not valid JSON or not an object
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data

    # msgspec first (fastest)
    try:
        result = msgspec.json.decode(raw)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e)

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use msgspec for compact output (very fast)
    if indent == 0:
        try:
            encoder = msgspec.json.Encoder()
            return encoder.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None)


def dumps_bytes(obj: Any) -> bytes:
    """Encode object to compact JSON bytes for a request body."""
    try:
        return orjson.dumps(obj)
    except TypeError as e:
        raise JSONParseError(f"Cannot encode {type(obj).__name__}: {e}", e)


def json_depth(obj: Any, current_depth: int = 0) -> int:
    """Return the nesting depth of a decoded JSON value."""
    if isinstance(obj, dict):
        return max((json_depth(v, current_depth + 1) for v in obj.values()), default=current_depth)
    if isinstance(obj, list):
        return max((json_depth(v, current_depth + 1) for v in obj), default=current_depth)
    return current_depth
