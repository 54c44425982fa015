"""Turning a normalised JSON value into TOON lines."""

from collections.abc import Collection, Iterator, Sequence
from typing import Optional

from toonenc.constants import DOT, LIST_ITEM_MARKER, LIST_ITEM_PREFIX
from toonenc.folding import FoldResult, try_fold_key_chain
from toonenc.normalize import (
    is_array_of_arrays,
    is_array_of_objects,
    is_array_of_primitives,
    is_json_primitive,
)
from toonenc.options import ResolvedEncodeOptions
from toonenc.primitives import (
    encode_and_join_primitives,
    encode_key,
    encode_primitive,
    format_header,
)
from toonenc.values import JsonValue


def encode_json_value(value: JsonValue, options: ResolvedEncodeOptions) -> list[str]:
    """Encode ``value`` into TOON lines, without trailing newlines.

    The value is expected to be normalised already (see
    :func:`toonenc.normalize.normalize_json_value`).
    """
    return list(_LineEncoder(options).encode(value))


def _tabular_header(rows: Sequence[JsonValue]) -> Optional[list[str]]:
    """Return the shared field list if ``rows`` can be written as a table."""
    if not rows:
        return None
    first = rows[0]
    if not isinstance(first, dict) or not first:
        return None
    header = list(first)
    for row in rows:
        if not isinstance(row, dict) or len(row) != len(header):
            return None
        if not all(key in row and is_json_primitive(row[key]) for key in header):
            return None
    return header


class _LineEncoder:
    """Produces the lines of one document for a fixed set of options."""

    def __init__(self, options: ResolvedEncodeOptions) -> None:
        self.options = options
        self.delimiter = options.delimiter
        self.indent = options.indent

    # Line builders -----------------------------------------------------

    def _line(self, depth: int, content: str) -> str:
        return " " * (self.indent * depth) + content

    def _item(self, depth: int, content: str) -> str:
        return self._line(depth, LIST_ITEM_PREFIX + content)

    def _header(
        self,
        length: int,
        key: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> str:
        return format_header(length, key, fields, self.delimiter)

    def _inline_array(self, values: list, key: Optional[str] = None) -> str:
        primitives = [item for item in values if is_json_primitive(item)]
        header = self._header(len(values), key)
        if not primitives:
            return header
        return f"{header} {encode_and_join_primitives(primitives, self.delimiter)}"

    # Entry point -------------------------------------------------------

    def encode(self, value: JsonValue) -> Iterator[str]:
        if isinstance(value, dict):
            yield from self._object(value, 0)
        elif isinstance(value, list):
            yield from self._array(None, value, 0)
        else:
            encoded = encode_primitive(value, self.delimiter)
            if encoded:
                yield encoded

    # Objects -----------------------------------------------------------

    def _object(
        self,
        obj: dict,
        depth: int,
        root_literal_keys: Optional[Collection[str]] = None,
        path_prefix: Optional[str] = None,
        remaining_depth: Optional[int] = None,
    ) -> Iterator[str]:
        siblings = obj.keys()
        if depth == 0 and root_literal_keys is None:
            root_literal_keys = {key for key in siblings if DOT in key}
        flatten_depth = (
            self.options.flatten_depth if remaining_depth is None else remaining_depth
        )
        for key, value in obj.items():
            yield from self._pair(
                key, value, depth, siblings, root_literal_keys, path_prefix, flatten_depth
            )

    def _pair(
        self,
        key: str,
        value: JsonValue,
        depth: int,
        siblings: Collection[str],
        root_literal_keys: Optional[Collection[str]],
        path_prefix: Optional[str],
        flatten_depth: int,
    ) -> Iterator[str]:
        folded = try_fold_key_chain(
            key,
            value,
            siblings,
            self.options,
            root_literal_keys,
            path_prefix,
            flatten_depth,
        )
        if folded is not None:
            yield from self._folded(
                folded, depth, root_literal_keys, path_prefix, flatten_depth
            )
            return

        encoded_key = encode_key(key)
        if isinstance(value, list):
            yield from self._array(key, value, depth)
        elif isinstance(value, dict):
            yield self._line(depth, f"{encoded_key}:")
            if value:
                current_path = key if path_prefix is None else f"{path_prefix}{DOT}{key}"
                yield from self._object(
                    value, depth + 1, root_literal_keys, current_path, flatten_depth
                )
        else:
            encoded = encode_primitive(value, self.delimiter)
            yield self._line(depth, f"{encoded_key}: {encoded}")

    def _folded(
        self,
        folded: FoldResult,
        depth: int,
        root_literal_keys: Optional[Collection[str]],
        path_prefix: Optional[str],
        flatten_depth: int,
    ) -> Iterator[str]:
        encoded_key = encode_key(folded.folded_key)
        if folded.remainder is not None:
            yield self._line(depth, f"{encoded_key}:")
            folded_path = (
                folded.folded_key
                if path_prefix is None
                else f"{path_prefix}{DOT}{folded.folded_key}"
            )
            yield from self._object(
                folded.remainder,
                depth + 1,
                root_literal_keys,
                folded_path,
                max(flatten_depth - folded.segment_count, 0),
            )
            return

        leaf = folded.leaf_value
        if isinstance(leaf, list):
            yield from self._array(folded.folded_key, leaf, depth)
        elif isinstance(leaf, dict):
            yield self._line(depth, f"{encoded_key}:")
        else:
            encoded = encode_primitive(leaf, self.delimiter)
            yield self._line(depth, f"{encoded_key}: {encoded}")

    # Arrays ------------------------------------------------------------

    def _array(self, key: Optional[str], items: list, depth: int) -> Iterator[str]:
        if not items:
            yield self._line(depth, self._header(0, key))
            return

        if is_array_of_primitives(items):
            yield self._line(depth, self._inline_array(items, key))
            return

        if is_array_of_arrays(items) and all(
            is_array_of_primitives(item) for item in items
        ):
            yield self._line(depth, self._header(len(items), key))
            for item in items:
                yield self._item(depth + 1, self._inline_array(item))
            return

        if is_array_of_objects(items):
            header = _tabular_header(items)
            if header is not None:
                yield self._line(depth, self._header(len(items), key, header))
                yield from self._tabular_rows(items, header, depth + 1)
                return

        yield self._line(depth, self._header(len(items), key))
        for item in items:
            yield from self._list_item(item, depth + 1)

    def _tabular_rows(
        self, rows: list, header: Sequence[str], depth: int
    ) -> Iterator[str]:
        for row in rows:
            values = [row[key] for key in header]
            yield self._line(depth, encode_and_join_primitives(values, self.delimiter))

    # List items --------------------------------------------------------

    def _list_item(self, value: JsonValue, depth: int) -> Iterator[str]:
        if isinstance(value, dict):
            yield from self._object_list_item(value, depth)
        elif isinstance(value, list):
            if is_array_of_primitives(value):
                yield self._item(depth, self._inline_array(value))
            else:
                yield self._item(depth, self._header(len(value)))
                for item in value:
                    yield from self._list_item(item, depth + 1)
        else:
            yield self._item(depth, encode_primitive(value, self.delimiter))

    def _object_list_item(self, obj: dict, depth: int) -> Iterator[str]:
        if not obj:
            yield self._line(depth, LIST_ITEM_MARKER)
            return

        entries = iter(obj.items())
        first_key, first_value = next(entries)
        rest = dict(entries)

        if isinstance(first_value, list) and is_array_of_objects(first_value):
            header = _tabular_header(first_value)
            if header is not None:
                formatted = self._header(len(first_value), first_key, header)
                yield self._item(depth, formatted)
                yield from self._tabular_rows(first_value, header, depth + 2)
                if rest:
                    yield from self._object(rest, depth + 1)
                return

        encoded_key = encode_key(first_key)
        if isinstance(first_value, list):
            if not first_value:
                yield self._item(depth, encoded_key + self._header(0))
            elif is_array_of_primitives(first_value):
                yield self._item(depth, encoded_key + self._inline_array(first_value))
            else:
                yield self._item(depth, encoded_key + self._header(len(first_value)))
                for item in first_value:
                    yield from self._list_item(item, depth + 2)
        elif isinstance(first_value, dict):
            yield self._item(depth, f"{encoded_key}:")
            if first_value:
                yield from self._object(first_value, depth + 2)
        else:
            encoded = encode_primitive(first_value, self.delimiter)
            yield self._item(depth, f"{encoded_key}: {encoded}")

        if rest:
            yield from self._object(rest, depth + 1)