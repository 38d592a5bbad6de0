"""Errors raised while decoding CSV input."""

from __future__ import annotations

from enum import Enum


class ReaderError(RuntimeError):
    """Base error for anything that goes wrong inside a Reader."""

    def __init__(self, message: str) -> None:
        super().__init__(f"csvstream: {message}")


class InvalidDelimiterError(ReaderError):
    """The field or comment delimiter cannot be used."""

    def __init__(self) -> None:
        super().__init__("invalid field or comment delimiter")


class ParseErrorKind(str, Enum):
    """Reason attached to a ParseError."""

    TRAILING_COMMA = "extra delimiter at end of line"
    BARE_QUOTE = 'bare " in non-quoted-field'
    QUOTE = 'extraneous or missing " in quoted-field'
    FIELD_COUNT = "wrong number of fields"


class ParseError(ReaderError):
    """A record could not be decoded.

    `start_line` is the line where the record began, `line` the line where the
    error was found. Columns are 0-based character offsets into that line.
    """

    def __init__(self, *, start_line: int, line: int, kind: ParseErrorKind, column: int | None = None) -> None:
        self.start_line = start_line
        self.line = line
        self.column = column
        self.kind = kind

        if kind is ParseErrorKind.FIELD_COUNT:
            message = f"record on line {line}: {kind.value}"
        elif start_line != line:
            message = f"record on line {start_line}; parse error on line {line}, column {column}: {kind.value}"
        else:
            message = f"parse error on line {line}, column {column}: {kind.value}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.start_line, self.line, self.column, self.kind) == (
            other.start_line,
            other.line,
            other.column,
            other.kind,
        )

    __hash__ = ReaderError.__hash__
