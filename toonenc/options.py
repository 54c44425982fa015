"""Encoding and decoding options and how their defaults are filled in."""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from toonenc.constants import DEFAULT_DELIMITER

PathSegment = Union[str, int]
"""One step of a path: an object key (``str``) or an array index (``int``)."""

EncodeReplacer = Callable[[str, Any, tuple], Any]
"""Called as ``replacer(key, value, path)``; see :mod:`toonenc.replacer`."""

UNLIMITED_DEPTH = sys.maxsize
DEFAULT_INDENT = 2


class KeyFoldingMode(Enum):
    """Whether single-key object chains are folded into dotted keys."""

    OFF = "off"
    SAFE = "safe"


class ExpandPathsMode(Enum):
    """Whether dotted keys are expanded into nested objects when decoding."""

    OFF = "off"
    SAFE = "safe"


@dataclass(frozen=True)
class EncodeOptions:
    """Encoding options; any field left as None takes its default."""

    indent: Optional[int] = None
    delimiter: Optional[str] = None
    key_folding: Optional[KeyFoldingMode] = None
    flatten_depth: Optional[int] = None
    replacer: Optional[EncodeReplacer] = None


@dataclass(frozen=True)
class DecodeOptions:
    """Decoding options; any field left as None takes its default."""

    indent: Optional[int] = None
    strict: Optional[bool] = None
    expand_paths: Optional[ExpandPathsMode] = None


@dataclass(frozen=True)
class DecodeStreamOptions:
    """Options for event-stream decoding."""

    indent: Optional[int] = None
    strict: Optional[bool] = None


@dataclass(frozen=True)
class ResolvedEncodeOptions:
    """Encoding options with every default filled in."""

    indent: int
    delimiter: str
    key_folding: KeyFoldingMode
    flatten_depth: int
    replacer: Optional[EncodeReplacer] = None


@dataclass(frozen=True)
class ResolvedDecodeOptions:
    """Decoding options with every default filled in."""

    indent: int
    strict: bool
    expand_paths: ExpandPathsMode


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def resolve_encode_options(
    options: Optional[EncodeOptions] = None,
) -> ResolvedEncodeOptions:
    """Fill in the defaults of ``options`` (which may be None)."""
    options = options or EncodeOptions()
    return ResolvedEncodeOptions(
        indent=_or_default(options.indent, DEFAULT_INDENT),
        delimiter=_or_default(options.delimiter, DEFAULT_DELIMITER),
        key_folding=_or_default(options.key_folding, KeyFoldingMode.OFF),
        flatten_depth=_or_default(options.flatten_depth, UNLIMITED_DEPTH),
        replacer=options.replacer,
    )


def resolve_decode_options(
    options: Optional[DecodeOptions] = None,
) -> ResolvedDecodeOptions:
    """Fill in the defaults of ``options`` (which may be None)."""
    options = options or DecodeOptions()
    return ResolvedDecodeOptions(
        indent=_or_default(options.indent, DEFAULT_INDENT),
        strict=_or_default(options.strict, True),
        expand_paths=_or_default(options.expand_paths, ExpandPathsMode.OFF),
    )