"""Streaming CSV reader.

The decoding rules follow Go's `encoding/csv`:

- records are separated by `\\n`; `\\r\\n` is normalized to `\\n`,
- empty lines and (optionally) comment lines are skipped,
- quoted fields may contain delimiters, `""` escapes and newlines,
- a stray quote is an error unless `lazy_quotes` is set.
"""

from __future__ import annotations

from typing import Iterator

from .errors import InvalidDelimiterError, ParseError, ParseErrorKind
from .source import DEFAULT_CHUNK_SIZE, LineSource, Source

_QUOTE = '"'
_LATIN1_SPACE = frozenset("\t\n\v\f\r \x85\xa0")


def _is_space(ch: str) -> bool:
    if ch <= "\xff":
        return ch in _LATIN1_SPACE
    return ch.isspace()


def _valid_delim(ch: str) -> bool:
    if len(ch) != 1:
        return False
    if ch in (_QUOTE, "\r", "\n", "\ufffd"):
        return False
    return not 0xD800 <= ord(ch) <= 0xDFFF


class Reader:
    """Reads records from CSV input one at a time.

    Options may be changed between reads; delimiters are validated on every
    call to `read()`.

    `fields_per_record` > 0 requires that many fields in every record, 0 sets
    the expectation from the first record, and a negative value disables the
    check.
    """

    def __init__(
        self,
        source: Source,
        *,
        comma: str = ",",
        comment: str = "",
        fields_per_record: int = 0,
        lazy_quotes: bool = False,
        trim_leading_space: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        self.comma = comma
        self.comment = comment
        self.fields_per_record = fields_per_record
        self.lazy_quotes = lazy_quotes
        self.trim_leading_space = trim_leading_space

        self._source = LineSource(source, chunk_size=chunk_size, encoding=encoding)
        self._num_line = 0
        self._offset = 0
        self._record_line = 0

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far."""

        return self._num_line

    @property
    def input_offset(self) -> int:
        """Number of characters consumed so far."""

        return self._offset

    def __iter__(self) -> Iterator[list[str]]:
        return self

    def __next__(self) -> list[str]:
        record = self.read()
        if record is None:
            raise StopIteration
        return record

    def read(self) -> list[str] | None:
        """Returns the next record, or None at end of input."""

        record = self._read_record()
        if record is None:
            return None

        if self.fields_per_record > 0:
            if len(record) != self.fields_per_record:
                raise ParseError(
                    start_line=self._record_line,
                    line=self._record_line,
                    kind=ParseErrorKind.FIELD_COUNT,
                )
        elif self.fields_per_record == 0:
            self.fields_per_record = len(record)
        return record

    def read_all(self) -> list[list[str]]:
        """Reads every remaining record."""

        return list(self)

    def _read_line(self) -> str | None:
        line = self._source.read_line()
        self._num_line += 1
        self._offset += len(line)
        if not line:
            return None

        if line[-1] == "\r":
            # Trailing \r right before end of input.
            line = line[:-1]
        elif line.endswith("\r\n"):
            line = line[:-2] + "\n"
        return line

    def _read_record(self) -> list[str] | None:
        comma = self.comma
        comment = self.comment
        if comma == comment or not _valid_delim(comma) or (comment and not _valid_delim(comment)):
            raise InvalidDelimiterError()

        while True:
            line = self._read_line()
            if line is None:
                return None
            if comment and line.startswith(comment):
                continue
            if line == "\n" or not line:
                continue
            break

        full_line = line
        pos = 0
        rec_line = self._num_line
        self._record_line = rec_line
        fields: list[str] = []

        while True:
            if self.trim_leading_space:
                while pos < len(line) and _is_space(line[pos]):
                    pos += 1

            if pos >= len(line) or line[pos] != _QUOTE:
                # Non-quoted field.
                i = line.find(comma, pos)
                if i >= 0:
                    field = line[pos:i]
                else:
                    end = len(line)
                    if end > pos and line[-1] == "\n":
                        end -= 1
                    field = line[pos:end]

                if not self.lazy_quotes:
                    j = field.find(_QUOTE)
                    if j >= 0:
                        raise ParseError(
                            start_line=rec_line,
                            line=self._num_line,
                            column=len(full_line) - (len(line) - (pos + j)),
                            kind=ParseErrorKind.BARE_QUOTE,
                        )

                fields.append(field)
                if i >= 0:
                    pos = i + 1
                    continue
                return fields

            # Quoted field.
            pos += 1
            parts: list[str] = []
            while True:
                i = line.find(_QUOTE, pos)
                if i >= 0:
                    parts.append(line[pos:i])
                    pos = i + 1
                    rest = len(line) - pos
                    nl = 1 if rest > 0 and line[-1] == "\n" else 0
                    nxt = line[pos] if rest > 0 else ""
                    if nxt == _QUOTE:
                        # Escaped quote.
                        parts.append(_QUOTE)
                        pos += 1
                    elif nxt == comma:
                        pos += 1
                        fields.append("".join(parts))
                        break
                    elif rest == nl:
                        fields.append("".join(parts))
                        return fields
                    elif self.lazy_quotes:
                        parts.append(_QUOTE)
                    else:
                        raise ParseError(
                            start_line=rec_line,
                            line=self._num_line,
                            column=len(full_line) - rest - 1,
                            kind=ParseErrorKind.QUOTE,
                        )
                elif pos < len(line):
                    # Field continues on the next line.
                    parts.append(line[pos:])
                    line = self._read_line() or ""
                    full_line = line
                    pos = 0
                else:
                    # Input ended inside the quoted field.
                    if not self.lazy_quotes:
                        raise ParseError(
                            start_line=rec_line,
                            line=self._num_line,
                            column=len(full_line),
                            kind=ParseErrorKind.QUOTE,
                        )
                    fields.append("".join(parts))
                    return fields
