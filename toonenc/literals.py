"""Recognition of literal tokens: booleans, null and numbers."""

import math
import re

from toonenc.constants import (
    FALSE_LITERAL,
    NULL_LITERAL,
    TRUE_LITERAL,
    UNICODE_WHITESPACE,
)

_LEADING_ZERO = re.compile(r"-?0[0-9]")
_NUMERIC_LIKE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_NUMERIC_LITERAL = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def is_boolean_or_null_literal(value: str) -> bool:
    """Return True for the exact tokens ``true``, ``false`` and ``null``."""
    return value in (TRUE_LITERAL, FALSE_LITERAL, NULL_LITERAL)


def is_numeric_like(value: str) -> bool:
    """Return True if the text could be read as a number.

    Integers with a leading zero (such as ``05``) count as numeric-like.
    """
    trimmed = value.strip(UNICODE_WHITESPACE)
    if not trimmed:
        return False
    if _LEADING_ZERO.match(trimmed):
        return True
    return _NUMERIC_LIKE.fullmatch(trimmed) is not None


def is_numeric_literal(value: str) -> bool:
    """Return True if the text is a canonical, finite numeric literal."""
    trimmed = value.strip(UNICODE_WHITESPACE)
    if not trimmed or _NUMERIC_LITERAL.fullmatch(trimmed) is None:
        return False
    try:
        return math.isfinite(float(trimmed))
    except ValueError:
        return False