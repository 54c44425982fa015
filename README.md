# toonenc

`toonenc` turns JSON data into TOON, an indentation-based notation that
states array lengths up front, writes uniform arrays of objects as tables
and can fold single-key chains into dotted keys. The result is usually
shorter than the equivalent JSON.

## Installation

```
pip install toonenc
```

The package has no runtime dependencies.

## Encoding

```python
from toonenc.encoding import encode, json_to_toon

print(json_to_toon('{"name": "Alice", "age": 30}'))
# name: Alice
# age: 30

print(encode({"items": ["a", "b", "c"]}))
# items[3]: a,b,c

print(encode({"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}))
# users[2]{id,name}:
#   1,Alice
#   2,Bob
```

`encode` accepts ordinary JSON-like Python data: `None`, `bool`, `int`,
`float`, `str`, lists, tuples and dicts with string keys. Anything else
raises `TypeError`. `encode_lines` returns the same output as a list of
lines.

## Options

```python
from toonenc.encoding import encode
from toonenc.options import EncodeOptions, KeyFoldingMode

options = EncodeOptions(delimiter="|", key_folding=KeyFoldingMode.SAFE)
print(encode({"data": {"meta": {"items": ["x", "y"]}}}, options))
# data.meta.items[2|]: x|y
```

- `indent`: spaces per nesting level (default 2)
- `delimiter`: separator for array values and table rows (default `,`)
- `key_folding`: `KeyFoldingMode.OFF` (default) or `KeyFoldingMode.SAFE`
- `flatten_depth`: the most segments a folded key may have (default unlimited)
- `replacer`: a callable `replacer(key, value, path)` that returns the value
  to write. Return `toonenc.replacer.OMIT` to drop the entry; returning
  `None` writes `null`.

Numbers that are not finite become `null`, `-0` becomes `0`, and numbers are
always written in plain decimal notation.

## Events

`encode_stream_events` and `iter_encode_events` describe a value as a flat
sequence of `StartObject`, `Key`, `Primitive`, `StartArray`, `EndArray` and
`EndObject` events, the classes defined in `toonenc.values`.

## Async

`encode_async`, `encode_lines_async` and `encode_events_async` are coroutine
versions of the functions above. `AsyncEncodeStream` yields output lines and
`AsyncEncodeEventStream` yields events with `async for`.

## Errors

Failures raise subclasses of `toonenc.errors.ToonError`. For example,
`json_to_toon` raises `ToonJSONError` when its input is not valid JSON.

## What this package does not do

`toonenc` only encodes. It has no TOON decoder, so it cannot read TOON text
back into JSON, and the decoding options in `toonenc.options`
(`DecodeOptions`, `ExpandPathsMode`) are not used by anything in the
package. There is no command-line tool; use the functions from Python.