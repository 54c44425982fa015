"""Normalisation of values before encoding, and shape predicates."""

from typing import Any

from toonenc.values import JsonPrimitive, JsonValue, number_from_float


def normalize_primitive(value: Any) -> JsonPrimitive:
    """Turn numbers into finite floats; non-finite numbers become None."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (int, float)):
        try:
            return number_from_float(float(value))
        except OverflowError:
            return None
    return value


def normalize_json_value(value: Any) -> JsonValue:
    """Return a copy of ``value`` with every number normalised."""
    if isinstance(value, dict):
        return {key: normalize_json_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_json_value(item) for item in value]
    return normalize_primitive(value)


def is_json_primitive(value: Any) -> bool:
    """Return True for anything that is neither an array nor an object."""
    return not isinstance(value, (list, dict))


def is_json_array(value: Any) -> bool:
    return isinstance(value, list)


def is_json_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_empty_object(value: dict) -> bool:
    return not value


def is_array_of_primitives(value: list) -> bool:
    """True when every item is a primitive (also for an empty array)."""
    return all(is_json_primitive(item) for item in value)


def is_array_of_arrays(value: list) -> bool:
    """True when every item is an array (also for an empty array)."""
    return all(isinstance(item, list) for item in value)


def is_array_of_objects(value: list) -> bool:
    """True when every item is an object (also for an empty array)."""
    return all(isinstance(item, dict) for item in value)