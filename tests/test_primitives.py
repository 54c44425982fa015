import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toonenc.primitives import (
    encode_and_join_primitives,
    encode_key,
    encode_primitive,
    encode_string_literal,
    format_header,
    format_number,
)
from toonenc.strings import unescape_string


@pytest.mark.parametrize(
    ("value", "expected"),
    [(42.0, "42"), (3.14, "3.14"), (-1.0, "-1"), (30.0, "30")],
)
def test_numbers(value, expected):
    assert format_number(value) == expected
    assert encode_primitive(value, ",") == expected


def test_zero_and_negative_zero():
    assert format_number(0.0) == "0"
    assert format_number(-0.0) == "0"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_are_null(value):
    assert format_number(value) == "null"


def test_literals():
    assert encode_primitive(None, ",") == "null"
    assert encode_primitive(True, ",") == "true"
    assert encode_primitive(False, ",") == "false"


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_number_text_reads_back_without_exponent(value):
    text = format_number(value)
    assert "e" not in text.lower()
    assert float(text) == value


def test_plain_strings_stay_bare():
    assert encode_primitive("Alice", ",") == "Alice"
    assert encode_primitive("bob@example.com", ",") == "bob@example.com"
    assert encode_primitive("こんにちは", ",") == "こんにちは"


@pytest.mark.parametrize(
    "value", ["", "true", "null", "42", "-1", "a:b", "- item", " pad", "x[0]", "say \"hi\""]
)
def test_ambiguous_strings_are_quoted(value):
    encoded = encode_string_literal(value, ",")
    assert encoded.startswith('"') and encoded.endswith('"')
    assert unescape_string(encoded[1:-1]) == value


def test_escapes_inside_quotes():
    assert encode_string_literal("hello\nworld", ",") == '"hello\\nworld"'


def test_delimiter_decides_quoting():
    assert encode_string_literal("a,b", ",") == '"a,b"'
    assert encode_string_literal("a,b", "|") == "a,b"
    assert encode_string_literal("a|b", "|") == '"a|b"'


@given(st.text())
def test_string_literal_round_trips(value):
    encoded = encode_string_literal(value, ",")
    if encoded.startswith('"') and encoded.endswith('"') and len(encoded) >= 2:
        decoded = unescape_string(encoded[1:-1])
    else:
        decoded = encoded
    assert decoded == value


def test_keys():
    assert encode_key("name") == "name"
    assert encode_key("a.b") == "a.b"
    assert encode_key("my-key") == '"my-key"'
    assert encode_key("") == '""'
    assert encode_key("123") == '"123"'


def test_join():
    assert encode_and_join_primitives(["a", "b", "c"], ",") == "a,b,c"
    assert encode_and_join_primitives(["x", "y", "z"], "|") == "x|y|z"
    assert encode_and_join_primitives([], ",") == ""


def test_inline_array_line_from_header_and_values():
    line = format_header(3, "items", None, ",") + " " + encode_and_join_primitives(
        ["a", "b", "c"], ","
    )
    assert line == "items[3]: a,b,c"


def test_pipe_delimiter_appears_in_header():
    line = format_header(3, "items", None, "|") + " " + encode_and_join_primitives(
        ["x", "y", "z"], "|"
    )
    assert line == "items[3|]: x|y|z"


def test_empty_array_header():
    assert format_header(0, "empty", None, ",") == "empty[0]:"
    assert format_header(0, None, None, ",") == "[0]:"


def test_tabular_header_fields():
    assert format_header(2, "users", ["id", "name"], ",") == "users[2]{id,name}:"
    assert format_header(2, "users", ["id", "name"], "|") == "users[2|]{id|name}:"
    assert format_header(1, None, ["my-key"], ",") == '[1]{"my-key"}:'