"""csvstream: a streaming CSV reader and its read benchmark."""

from .errors import InvalidDelimiterError, ParseError, ParseErrorKind, ReaderError
from .reader import Reader

__all__ = [
    "InvalidDelimiterError",
    "ParseError",
    "ParseErrorKind",
    "Reader",
    "ReaderError",
    "benchmarks",
    "shared",
]
