"""Escaping and scanning helpers for quoted strings."""

from toonenc.constants import BACKSLASH, CARRIAGE_RETURN, DOUBLE_QUOTE, NEWLINE, TAB

_ESCAPES = str.maketrans(
    {
        BACKSLASH: BACKSLASH * 2,
        DOUBLE_QUOTE: BACKSLASH + DOUBLE_QUOTE,
        NEWLINE: BACKSLASH + "n",
        CARRIAGE_RETURN: BACKSLASH + "r",
        TAB: BACKSLASH + "t",
    }
)

_UNESCAPES = {
    "n": NEWLINE,
    "t": TAB,
    "r": CARRIAGE_RETURN,
    BACKSLASH: BACKSLASH,
    DOUBLE_QUOTE: DOUBLE_QUOTE,
}


def escape_string(value: str) -> str:
    """Escape backslashes, quotes, newlines, carriage returns and tabs."""
    return value.translate(_ESCAPES)


def unescape_string(value: str) -> str:
    """Undo :func:`escape_string`.

    Raises ValueError on an unknown escape or a trailing backslash.
    """
    parts: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != BACKSLASH:
            parts.append(ch)
            continue
        following = next(chars, None)
        if following is None:
            raise ValueError("Invalid escape sequence: backslash at end of string")
        replacement = _UNESCAPES.get(following)
        if replacement is None:
            raise ValueError(f"Invalid escape sequence: \\{following}")
        parts.append(replacement)
    return "".join(parts)


def find_closing_quote(content: str, start: int) -> int | None:
    """Return the index of the quote closing the one at ``start``, or None."""
    length = len(content)
    positions = iter(range(start + 1, length))
    for i in positions:
        ch = content[i]
        if ch == BACKSLASH and i + 1 < length:
            next(positions, None)
            continue
        if ch == DOUBLE_QUOTE:
            return i
    return None


def find_unquoted_char(content: str, target: str, start: int) -> int | None:
    """Return the first index of ``target`` at or after ``start`` outside quotes."""
    length = len(content)
    in_quotes = False
    positions = iter(range(start, length))
    for i in positions:
        ch = content[i]
        if in_quotes and ch == BACKSLASH and i + 1 < length:
            next(positions, None)
            continue
        if ch == DOUBLE_QUOTE:
            in_quotes = not in_quotes
            continue
        if ch == target and not in_quotes:
            return i
    return None