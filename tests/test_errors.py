import json
from pathlib import Path

import pytest

from toonenc.errors import (
    EventStreamError,
    PathExpansionError,
    ToonError,
    ToonIOError,
    ToonJSONError,
    ToonParseError,
    ToonValidationError,
    file_create_error,
    file_read_error,
    file_write_error,
    invalid_array_length,
    invalid_indentation,
    json_parse_error,
    json_stringify_error,
    mismatched_end,
    missing_colon,
    path_conflict,
    stdin_read_error,
    stdout_write_error,
    tabs_not_allowed,
    unexpected_event,
    unterminated_string,
)


def test_parse_error_format():
    err = ToonParseError(3, "boom")
    assert err.line == 3
    assert err.message == "boom"
    assert str(err) == "Line 3: boom"


def test_validation_error_format():
    err = ToonValidationError(5, "bad")
    assert err.line == 5
    assert str(err) == "Validation error at line 5: bad"


def test_plain_message():
    err = ToonError("something")
    assert str(err) == "something"
    assert err.message == "something"


@pytest.mark.parametrize(
    ("factory", "cls", "fragment"),
    [
        (lambda: unterminated_string(7), ToonParseError, "missing closing quote"),
        (lambda: missing_colon(7), ToonParseError, "Missing colon after key"),
        (lambda: invalid_array_length(7, "x"), ToonParseError, "Invalid array length: x"),
        (lambda: tabs_not_allowed(7), ToonValidationError, "Tabs are not allowed"),
        (
            lambda: invalid_indentation(7, 2, 3),
            ToonValidationError,
            "Indentation must be exact multiple of 2, but found 3 spaces",
        ),
    ],
)
def test_line_error_helpers(factory, cls, fragment):
    err = factory()
    assert isinstance(err, cls)
    assert err.line == 7
    assert fragment in str(err)


def test_event_stream_helpers():
    err = mismatched_end("endObject", "endArray")
    assert isinstance(err, EventStreamError)
    assert "Mismatched end event: expected endObject, found endArray" in str(err)
    other = unexpected_event("key", "outside object")
    assert str(other).endswith("Unexpected key event outside object")


def test_path_conflict():
    err = path_conflict("a.b", "a")
    assert isinstance(err, PathExpansionError)
    assert err.path == "a.b"
    assert str(err) == "Path expansion error for 'a.b': conflicts with existing key 'a'"


@pytest.mark.parametrize(
    ("factory", "operation"),
    [
        (file_read_error, "Failed to read file"),
        (file_write_error, "Failed to write to file"),
        (file_create_error, "Failed to create file"),
    ],
)
def test_file_errors(factory, operation):
    source = FileNotFoundError("missing")
    path = Path("data") / "input.json"
    err = factory(path, source)
    assert isinstance(err, ToonIOError)
    assert err.source is source
    assert err.__cause__ is source
    assert str(err) == f"{operation} '{path}': {source}"


def test_stream_errors_have_no_path():
    source = OSError("closed")
    assert str(stdin_read_error(source)) == f"Failed to read stdin: {source}"
    assert str(stdout_write_error(source)) == f"Failed to write to stdout: {source}"


def test_json_parse_error():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads('{"name": }')
    err = json_parse_error(info.value)
    assert isinstance(err, ToonJSONError)
    assert "Failed to parse JSON" in str(err)


def test_json_stringify_error():
    err = json_stringify_error(ValueError("bad"))
    assert "Failed to stringify JSON: bad" in str(err)


def test_all_errors_catchable_as_base():
    errors = [
        missing_colon(1),
        tabs_not_allowed(1),
        mismatched_end("endObject", "endArray"),
        path_conflict("a.b", "a"),
        json_stringify_error(ValueError("bad")),
        stdin_read_error(OSError("closed")),
    ]
    assert all(isinstance(err, ToonError) for err in errors)
    assert errors[0].line == 1
    assert str(errors[0]) == "Line 1: Missing colon after key"