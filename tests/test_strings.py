import pytest
from hypothesis import given
from hypothesis import strategies as st

from toonenc.strings import (
    escape_string,
    find_closing_quote,
    find_unquoted_char,
    unescape_string,
)


@given(st.text())
def test_escape_round_trip(text):
    assert unescape_string(escape_string(text)) == text


@given(st.text())
def test_escaped_has_no_raw_control_characters(text):
    escaped = escape_string(text)
    assert "\n" not in escaped
    assert "\r" not in escaped
    assert "\t" not in escaped


def test_escape_quotes():
    assert escape_string('say "hi"') == 'say \\"hi\\"'


def test_escape_leaves_plain_text():
    text = "plain text 123"
    assert escape_string(text) == text


def test_unescape_trailing_backslash():
    with pytest.raises(ValueError, match="backslash at end of string"):
        unescape_string("abc\\")


def test_unescape_unknown_escape():
    with pytest.raises(ValueError, match="Invalid escape sequence"):
        unescape_string("a\\xb")


def test_find_closing_quote_skips_escaped_quote():
    content = '"ab\\"c" rest'
    index = find_closing_quote(content, 0)
    assert content[index] == '"'
    assert unescape_string(content[1:index]) == 'ab"c'


def test_find_closing_quote_unterminated():
    assert find_closing_quote('"abc', 0) is None


def test_find_closing_quote_trailing_backslash():
    assert find_closing_quote('"ab\\', 0) is None


def test_find_unquoted_char_skips_quoted():
    content = 'a"b:c":d'
    assert find_unquoted_char(content, ":", 0) == content.rindex(":")


def test_find_unquoted_char_all_quoted():
    assert find_unquoted_char('"a:b"', ":", 0) is None


def test_find_unquoted_char_respects_start():
    content = "a:b:c"
    assert find_unquoted_char(content, ":", 2) == content.rindex(":")


def test_find_unquoted_char_past_end():
    assert find_unquoted_char("a:b", ":", 10) is None


@given(st.text(alphabet=st.characters(blacklist_characters='"\\')))
def test_find_unquoted_char_matches_find_without_quotes(text):
    expected = text.find(":")
    result = find_unquoted_char(text, ":", 0)
    assert result == (expected if expected >= 0 else None)