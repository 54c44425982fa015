"""Exceptions raised while encoding and decoding TOON."""

import os
from typing import Any


class ToonError(Exception):
    """Base class for all TOON errors; also used for plain messages."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ToonParseError(ToonError):
    """Malformed input at a given line."""

    def __init__(self, line: int, message: str) -> None:
        Exception.__init__(self, f"Line {line}: {message}")
        self.line = line
        self.message = message


class ToonValidationError(ToonError):
    """A strict-mode rule was broken at a given line."""

    def __init__(self, line: int, message: str) -> None:
        Exception.__init__(self, f"Validation error at line {line}: {message}")
        self.line = line
        self.message = message


class EventStreamError(ToonError):
    """An event stream was not well formed."""

    def __init__(self, message: str) -> None:
        Exception.__init__(self, f"Event stream error: {message}")
        self.message = message


class PathExpansionError(ToonError):
    """A dotted path could not be expanded."""

    def __init__(self, path: str, message: str) -> None:
        Exception.__init__(self, f"Path expansion error for '{path}': {message}")
        self.path = path
        self.message = message


class ToonIOError(ToonError):
    """An I/O operation failed."""

    def __init__(
        self,
        operation: str,
        path: "str | os.PathLike[str] | None",
        source: BaseException,
    ) -> None:
        location = f" '{os.fspath(path)}'" if path is not None else ""
        Exception.__init__(self, f"{operation}{location}: {source}")
        self.operation = operation
        self.path = path
        self.source = source
        self.__cause__ = source


class ToonJSONError(ToonError):
    """JSON text could not be parsed or produced."""

    def __init__(self, message: str) -> None:
        Exception.__init__(self, f"JSON error: {message}")
        self.message = message


def unterminated_string(line: int) -> ToonParseError:
    return ToonParseError(line, "Unterminated string: missing closing quote")


def missing_colon(line: int) -> ToonParseError:
    return ToonParseError(line, "Missing colon after key")


def invalid_array_length(line: int, value: str) -> ToonParseError:
    return ToonParseError(line, f"Invalid array length: {value}")


def tabs_not_allowed(line: int) -> ToonValidationError:
    return ToonValidationError(
        line, "Tabs are not allowed in indentation in strict mode"
    )


def invalid_indentation(line: int, expected: int, found: int) -> ToonValidationError:
    return ToonValidationError(
        line,
        f"Indentation must be exact multiple of {expected}, but found {found} spaces",
    )


def mismatched_end(expected: str, found: str) -> EventStreamError:
    return EventStreamError(f"Mismatched end event: expected {expected}, found {found}")


def unexpected_event(event: str, context: str) -> EventStreamError:
    return EventStreamError(f"Unexpected {event} event {context}")


def path_conflict(path: str, existing: str) -> PathExpansionError:
    return PathExpansionError(path, f"conflicts with existing key '{existing}'")


def file_read_error(path: Any, source: BaseException) -> ToonIOError:
    return ToonIOError("Failed to read file", path, source)


def file_write_error(path: Any, source: BaseException) -> ToonIOError:
    return ToonIOError("Failed to write to file", path, source)


def file_create_error(path: Any, source: BaseException) -> ToonIOError:
    return ToonIOError("Failed to create file", path, source)


def stdin_read_error(source: BaseException) -> ToonIOError:
    return ToonIOError("Failed to read stdin", None, source)


def stdout_write_error(source: BaseException) -> ToonIOError:
    return ToonIOError("Failed to write to stdout", None, source)


def json_parse_error(err: BaseException) -> ToonJSONError:
    return ToonJSONError(f"Failed to parse JSON: {err}")


def json_stringify_error(err: BaseException) -> ToonJSONError:
    return ToonJSONError(f"Failed to stringify JSON: {err}")