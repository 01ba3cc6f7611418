"""
Lossy streaming text decoder.

Turns a sequential byte source into a stream of characters for the
reader's state machine. Only one decoded chunk is held at a time; the
reader sees it one character at a time with a single character of
lookahead.

Decoding Rules:
    - Invalid byte sequences become U+FFFD (never an error)
    - Multi-byte sequences split across reads decode correctly
    - Sources that already yield str pass through undecoded
"""
from __future__ import annotations

import codecs
from typing import Any, Optional

from simplecsv.errors import CSVDecodeError
from simplecsv.model import DEFAULT_CHUNK_SIZE


class TextDecoder:
    """
    Character cursor over a byte (or text) source.

    The source only needs a read(size) method. Seeking is never used.
    """

    def __init__(self, source: Any, encoding: str = "utf-8", chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        try:
            decoder_factory = codecs.getincrementaldecoder(encoding)
        except LookupError as e:
            raise CSVDecodeError(f"Unknown encoding: {encoding}") from e

        self._source = source
        self._decoder = decoder_factory(errors="replace")
        self._chunk_size = chunk_size
        self._buffer = ""
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        """Make sure at least one character is buffered. Returns False at end of input."""
        while self._pos >= len(self._buffer):
            if self._eof:
                return False

            try:
                chunk = self._source.read(self._chunk_size)
            except OSError as e:
                raise CSVDecodeError(f"Failed to read from source: {e}") from e

            if isinstance(chunk, str):
                self._eof = not chunk
                text = chunk
            elif isinstance(chunk, (bytes, bytearray, memoryview)):
                self._eof = not chunk
                text = self._decoder.decode(bytes(chunk), final=self._eof)
            else:
                raise CSVDecodeError(f"Source returned {type(chunk).__name__}, expected bytes or str")

            self._buffer = text
            self._pos = 0
        return True

    def read_char(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        if not self._fill():
            return None
        c = self._buffer[self._pos]
        self._pos += 1
        return c

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end of input."""
        if not self._fill():
            return None
        return self._buffer[self._pos]

