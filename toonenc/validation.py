"""Rules for when keys and values may be written without quotes."""

import string

from toonenc.constants import (
    DEFAULT_DELIMITER,
    LIST_ITEM_MARKER,
    UNICODE_WHITESPACE,
)
from toonenc.literals import is_boolean_or_null_literal, is_numeric_like

_FIRST_CHARS = frozenset(string.ascii_letters + "_")
_SEGMENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_KEY_CHARS = _SEGMENT_CHARS | {"."}
_FORBIDDEN_IN_VALUE = frozenset(':"\\[]{}\n\r\t')


def _is_identifier_like(text: str, allowed: frozenset[str]) -> bool:
    if not text or text[0] not in _FIRST_CHARS:
        return False
    return all(ch in allowed for ch in text[1:])


def is_valid_unquoted_key(key: str) -> bool:
    """Return True if the key may be written bare (dots allowed)."""
    return _is_identifier_like(key, _KEY_CHARS)


def is_identifier_segment(segment: str) -> bool:
    """Return True if the segment is a plain identifier (no dots)."""
    return _is_identifier_like(segment, _SEGMENT_CHARS)


def is_safe_unquoted(value: str, delimiter: str) -> bool:
    """Return True if a string value may be written without quotes."""
    if not value:
        return False
    if value.strip(UNICODE_WHITESPACE) != value:
        return False
    if is_boolean_or_null_literal(value) or is_numeric_like(value):
        return False
    if any(ch in _FORBIDDEN_IN_VALUE for ch in value):
        return False
    if delimiter in value:
        return False
    return not value.startswith(LIST_ITEM_MARKER)


def default_delimiter() -> str:
    """Return the delimiter used when none is given."""
    return DEFAULT_DELIMITER