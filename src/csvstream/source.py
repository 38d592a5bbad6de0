"""Chunked line splitting over strings, bytes and streams."""

from __future__ import annotations

import codecs
from typing import Protocol, Union

DEFAULT_CHUNK_SIZE = 64 * 1024
MIN_CHUNK_SIZE = 16


class ReadableStream(Protocol):
    """Anything with a file-like `read(size)`; text or binary."""

    def read(self, size: int = -1) -> str | bytes:
        """Returns up to `size` characters or bytes; empty at end of stream."""


Source = Union[str, bytes, bytearray, memoryview, ReadableStream]


class LineSource:
    """Splits input into `\\n`-terminated lines.

    Only `\\n` ends a line; `\\r` is passed through untouched so the reader can
    apply its own CRLF rules. Text streams should therefore be opened with
    `newline=""`. Binary streams are decoded incrementally with `encoding`.
    """

    def __init__(
        self,
        source: Source,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        self._chunk_size = max(int(chunk_size), MIN_CHUNK_SIZE)
        self._stream: ReadableStream | None = None
        self._decoder: codecs.IncrementalDecoder | None = None
        self._encoding = encoding
        self._buf = ""
        self._pos = 0
        self._eof = False

        if isinstance(source, str):
            self._buf = source
            self._eof = True
        elif isinstance(source, (bytes, bytearray, memoryview)):
            self._buf = bytes(source).decode(encoding)
            self._eof = True
        elif callable(getattr(source, "read", None)):
            self._stream = source
        else:
            raise TypeError(f"unsupported CSV source type: {type(source).__name__}")

    def read_line(self) -> str:
        """Returns the next line including its `\\n`, or "" once input is exhausted."""

        scanned = self._pos
        while True:
            i = self._buf.find("\n", scanned)
            if i >= 0:
                line = self._buf[self._pos : i + 1]
                self._pos = i + 1
                return line

            if self._eof:
                line = self._buf[self._pos :]
                self._pos = len(self._buf)
                return line

            # Do not rescan what was already searched.
            scanned = len(self._buf)
            shift = self._fill()
            scanned -= shift

    def _fill(self) -> int:
        """Appends the next chunk to the buffer; returns how far it was shifted left."""

        assert self._stream is not None
        shift = self._pos
        self._buf = self._buf[self._pos :]
        self._pos = 0

        chunk = self._stream.read(self._chunk_size)
        if isinstance(chunk, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder(self._encoding)()
            text = self._decoder.decode(bytes(chunk), final=not chunk)
        elif isinstance(chunk, str):
            text = chunk
        else:
            raise TypeError(f"unhandled stream result type: {type(chunk).__name__}")

        if not chunk:
            self._eof = True

        self._buf += text
        return shift
