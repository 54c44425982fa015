"""Applying a replacer function to every value before encoding.

The replacer is called as ``replacer(key, value, path)``. ``key`` is the
object key, the array index as text, or ``""`` for the root; ``path`` is a
tuple of keys and indices leading to the value. It returns the value to
use, or :data:`OMIT` to drop the entry. Returning None writes ``null``.
"""

from typing import Any

from toonenc.normalize import normalize_json_value
from toonenc.options import EncodeReplacer
from toonenc.values import JsonValue


class _Omit:
    __slots__ = ()

    def __repr__(self) -> str:
        return "OMIT"


OMIT = _Omit()
"""Returned by a replacer to drop the current entry."""


def apply_replacer(root: JsonValue, replacer: EncodeReplacer) -> JsonValue:
    """Return a copy of ``root`` with ``replacer`` applied throughout.

    Dropping the root itself is ignored: the root is kept as it was.
    """
    replaced = replacer("", root, ())
    if replaced is not OMIT:
        return _transform_children(normalize_json_value(replaced), replacer, ())
    return _transform_children(root, replacer, ())


def _transform_children(value: Any, replacer: EncodeReplacer, path: tuple) -> JsonValue:
    if isinstance(value, dict):
        return dict(_transform_entries(value.items(), replacer, path))
    if isinstance(value, list):
        return [item for _, item in _transform_entries(enumerate(value), replacer, path)]
    return value


def _transform_entries(entries, replacer: EncodeReplacer, path: tuple):
    for segment, value in entries:
        next_path = (*path, segment)
        replacement = replacer(str(segment), value, next_path)
        if replacement is OMIT:
            continue
        yield segment, _transform_children(
            normalize_json_value(replacement), replacer, next_path
        )