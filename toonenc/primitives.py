"""Encoding of primitives, keys and array headers."""

import math
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Optional

from toonenc.constants import (
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    DEFAULT_DELIMITER,
    DOUBLE_QUOTE,
    FALSE_LITERAL,
    NULL_LITERAL,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
)
from toonenc.strings import escape_string
from toonenc.validation import is_safe_unquoted, is_valid_unquoted_key
from toonenc.values import JsonPrimitive


def _quote(text: str) -> str:
    return f"{DOUBLE_QUOTE}{escape_string(text)}{DOUBLE_QUOTE}"


def format_number(value: float) -> str:
    """Write a number in plain decimal notation, never with an exponent.

    The digits are the shortest that read back to the same float; zero is
    ``0`` and non-finite numbers are ``null``.
    """
    try:
        value = float(value)
    except OverflowError:
        return NULL_LITERAL
    if value == 0.0:
        return "0"
    if not math.isfinite(value):
        return NULL_LITERAL
    return format(Decimal(repr(value)).normalize(), "f")


def encode_string_literal(value: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Write a string bare when that is safe, quoted and escaped otherwise."""
    if is_safe_unquoted(value, delimiter):
        return value
    return _quote(value)


def encode_key(key: str) -> str:
    """Write an object key bare when allowed, quoted otherwise."""
    if is_valid_unquoted_key(key):
        return key
    return _quote(key)


def encode_primitive(value: JsonPrimitive, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Write a primitive value as TOON text."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, str):
        return encode_string_literal(value, delimiter)
    return format_number(value)


def encode_and_join_primitives(
    values: Iterable[JsonPrimitive], delimiter: str = DEFAULT_DELIMITER
) -> str:
    """Encode each primitive and join them with the delimiter."""
    return delimiter.join(encode_primitive(value, delimiter) for value in values)


def format_header(
    length: int,
    key: Optional[str] = None,
    fields: Optional[Sequence[str]] = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Build an array header such as ``key[3]{a,b}:``."""
    parts = []
    if key is not None:
        parts.append(encode_key(key))
    marker = "" if delimiter == DEFAULT_DELIMITER else delimiter
    parts.append(f"{OPEN_BRACKET}{length}{marker}{CLOSE_BRACKET}")
    if fields is not None:
        joined = delimiter.join(encode_key(field) for field in fields)
        parts.append(f"{OPEN_BRACE}{joined}{CLOSE_BRACE}")
    parts.append(COLON)
    return "".join(parts)