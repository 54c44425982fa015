"""JSON value model and structural stream events.

Values are plain Python objects: ``None``, ``bool``, ``float``, ``str``,
``list`` and ``dict`` (whose order is kept). All numbers are floats.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

JsonPrimitive = Union[str, float, bool, None]
JsonValue = Union[JsonPrimitive, list, dict]


@dataclass(frozen=True)
class StartObject:
    """Start of an object."""


@dataclass(frozen=True)
class EndObject:
    """End of an object."""


@dataclass(frozen=True)
class StartArray:
    """Start of an array of the given length."""

    length: int


@dataclass(frozen=True)
class EndArray:
    """End of an array."""


@dataclass(frozen=True)
class Key:
    """An object key; ``was_quoted`` tells whether it needs quotes."""

    key: str
    was_quoted: bool = False


@dataclass(frozen=True)
class Primitive:
    """A primitive value."""

    value: JsonPrimitive


JsonStreamEvent = Union[StartObject, EndObject, StartArray, EndArray, Key, Primitive]


def number_from_float(value: float) -> float | None:
    """Return the number, ``None`` if not finite, and ``0.0`` for negative zero."""
    if not math.isfinite(value):
        return None
    if value == 0.0:
        return 0.0
    return float(value)


def to_json_value(value: Any) -> JsonValue:
    """Convert ordinary JSON-like Python data into the value model.

    Integers become floats, non-finite numbers become ``None`` and tuples
    become lists. Raises TypeError for anything that is not JSON data.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        try:
            return number_from_float(float(value))
        except OverflowError:
            return None
    if isinstance(value, float):
        return number_from_float(value)
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            result[key] = to_json_value(item)
        return result
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def to_plain_json(value: JsonValue) -> Any:
    """Return data ready for :func:`json.dumps`; non-finite numbers become ``None``."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: to_plain_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain_json(item) for item in value]
    return value