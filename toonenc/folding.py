"""Folding of single-key object chains into dotted keys."""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Optional

from toonenc.constants import DOT
from toonenc.normalize import is_json_object
from toonenc.options import KeyFoldingMode, ResolvedEncodeOptions
from toonenc.validation import is_identifier_segment
from toonenc.values import JsonValue


@dataclass
class FoldResult:
    """A folded key chain.

    ``remainder`` is the non-empty object left at the end of the chain, if
    any; ``leaf_value`` is the value the chain ends at.
    """

    folded_key: str
    remainder: Optional[dict]
    leaf_value: JsonValue
    segment_count: int


def _collect_single_key_chain(
    start_key: str, start_value: JsonValue, max_depth: int
) -> tuple[list[str], Optional[dict], JsonValue]:
    segments = [start_key]
    current = start_value
    while len(segments) < max_depth and isinstance(current, dict) and len(current) == 1:
        (next_key, current), = current.items()
        segments.append(next_key)
    if isinstance(current, dict) and current:
        return segments, current, current
    return segments, None, current


def try_fold_key_chain(
    key: str,
    value: JsonValue,
    siblings: Sequence[str],
    options: ResolvedEncodeOptions,
    root_literal_keys: Optional[Collection[str]] = None,
    path_prefix: Optional[str] = None,
    flatten_depth: Optional[int] = None,
) -> Optional[FoldResult]:
    """Fold ``key`` and its single-key descendants, or return None.

    Folding happens only in safe mode, for chains of at least two plain
    identifier segments whose dotted key clashes neither with a sibling nor
    with a literal dotted key at the root.
    """
    if options.key_folding is not KeyFoldingMode.SAFE:
        return None
    if not is_json_object(value):
        return None
    depth = options.flatten_depth if flatten_depth is None else flatten_depth
    if depth < 2:
        return None

    segments, remainder, leaf_value = _collect_single_key_chain(key, value, depth)
    if len(segments) < 2:
        return None
    if not all(is_identifier_segment(segment) for segment in segments):
        return None

    folded_key = DOT.join(segments)
    if folded_key in siblings:
        return None

    absolute_path = folded_key if path_prefix is None else f"{path_prefix}{DOT}{folded_key}"
    if root_literal_keys is not None and absolute_path in root_literal_keys:
        return None

    return FoldResult(
        folded_key=folded_key,
        remainder=remainder,
        leaf_value=leaf_value,
        segment_count=len(segments),
    )