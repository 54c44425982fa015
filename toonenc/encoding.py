"""High-level encoding: JSON values to TOON text, lines and events."""

import asyncio
import json
from collections.abc import AsyncIterator, Iterator
from typing import Any, Optional

from toonenc.encoders import encode_json_value
from toonenc.errors import json_parse_error
from toonenc.normalize import normalize_json_value
from toonenc.options import EncodeOptions, ResolvedEncodeOptions, resolve_encode_options
from toonenc.replacer import apply_replacer
from toonenc.validation import is_valid_unquoted_key
from toonenc.values import (
    EndArray,
    EndObject,
    JsonStreamEvent,
    JsonValue,
    Key,
    Primitive,
    StartArray,
    StartObject,
    to_json_value,
)


def _prepare(
    value: Any, options: Optional[EncodeOptions]
) -> tuple[ResolvedEncodeOptions, JsonValue]:
    """Resolve options, then convert, normalise and apply the replacer."""
    resolved = resolve_encode_options(options)
    normalized = normalize_json_value(to_json_value(value))
    if resolved.replacer is not None:
        normalized = apply_replacer(normalized, resolved.replacer)
    return resolved, normalized


def encode_lines(value: Any, options: Optional[EncodeOptions] = None) -> list[str]:
    """Encode ``value`` into a list of TOON lines."""
    resolved, prepared = _prepare(value, options)
    return encode_json_value(prepared, resolved)


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode ``value`` into TOON text; lines are joined with newlines."""
    return "\n".join(encode_lines(value, options))


def _events(value: JsonValue) -> Iterator[JsonStreamEvent]:
    if isinstance(value, dict):
        yield StartObject()
        for key, item in value.items():
            yield Key(key, not is_valid_unquoted_key(key))
            yield from _events(item)
        yield EndObject()
    elif isinstance(value, list):
        yield StartArray(len(value))
        for item in value:
            yield from _events(item)
        yield EndArray()
    else:
        yield Primitive(value)


def iter_encode_events(
    value: Any, options: Optional[EncodeOptions] = None
) -> Iterator[JsonStreamEvent]:
    """Yield the structural events describing ``value`` one at a time."""
    _, prepared = _prepare(value, options)
    return _events(prepared)


def encode_stream_events(
    value: Any, options: Optional[EncodeOptions] = None
) -> list[JsonStreamEvent]:
    """Return the structural events describing ``value``."""
    return list(iter_encode_events(value, options))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def json_to_toon(text: str) -> str:
    """Parse JSON text and encode it as TOON with default options.

    Raises ToonJSONError if the text is not valid JSON.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as err:
        raise json_parse_error(err) from err
    return encode(data)


class AsyncEncodeStream:
    """Asynchronous iterator over the TOON lines of a value."""

    def __init__(self, value: Any, options: Optional[EncodeOptions] = None) -> None:
        self._lines = encode_lines(value, options)
        self._position = 0

    def __len__(self) -> int:
        return len(self._lines)

    def __aiter__(self) -> "AsyncEncodeStream":
        return self

    async def __anext__(self) -> str:
        if self._position >= len(self._lines):
            raise StopAsyncIteration
        line = self._lines[self._position]
        self._position += 1
        return line


class AsyncEncodeEventStream:
    """Asynchronous iterator over the structural events of a value."""

    def __init__(self, value: Any, options: Optional[EncodeOptions] = None) -> None:
        self._events = iter_encode_events(value, options)

    def __aiter__(self) -> "AsyncEncodeEventStream":
        return self

    async def __anext__(self) -> JsonStreamEvent:
        try:
            return next(self._events)
        except StopIteration:
            raise StopAsyncIteration from None


async def _collect(stream: AsyncIterator[Any]) -> list:
    items = []
    async for item in stream:
        items.append(item)
        await asyncio.sleep(0)
    return items


async def encode_lines_async(
    value: Any, options: Optional[EncodeOptions] = None
) -> list[str]:
    """Encode ``value`` into TOON lines, yielding control between lines."""
    return await _collect(AsyncEncodeStream(value, options))


async def encode_async(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode ``value`` into TOON text asynchronously."""
    return "\n".join(await encode_lines_async(value, options))


async def encode_events_async(
    value: Any, options: Optional[EncodeOptions] = None
) -> list[JsonStreamEvent]:
    """Return the structural events describing ``value`` asynchronously."""
    return await _collect(AsyncEncodeEventStream(value, options))