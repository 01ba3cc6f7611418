"""
Record reader (Byte Source -> Records).

Streams decoded text through a two-mode state machine and returns one
record per call.

State Machine:
    UNQUOTED:
        delimiter            -> close field
        terminator           -> close field, close record
        enclosure (empty)    -> QUOTED
        enclosure (data)     -> literal character
        carriage return      -> dropped
        anything else        -> field data
    QUOTED:
        doubled enclosure    -> literal enclosure
        single enclosure     -> UNQUOTED (later text joins the same field)
        anything else        -> field data, verbatim
        end of input         -> implicit close

There is no malformed-input error: "1,2\\",3" is ["1", "2\\"", "3"] and
"1,2,\\"3\\"123" is ["1", "2", "3123"].
"""
from __future__ import annotations

import io
import logging
from enum import Enum
from typing import Any, Iterator, List, Optional

from simplecsv.decoder import TextDecoder
from simplecsv.model import EmptyLinePolicy, ReaderOptions, Record

logger = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"


class ParseMode(Enum):
    """Top-level parser modes."""
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


class SimpleCsvReader:
    """
    Pull-based CSV record reader.

    Example:
        reader = SimpleCsvReader(open("data.csv", "rb"))
        row = reader.next_row()      # ["1", "2", "3"]
        ...
        reader.next_row()            # None once input is exhausted

    The reader is also an iterator over its remaining records.

    Properties:
        options: ReaderOptions in effect
        line_num: Terminator characters consumed so far
        records_read: Records returned so far

    IMPORTANT:
        A reader owns its buffers exclusively. It is not safe to pull
        from one instance on several threads without external locking.
    """

    def __init__(self, source: Any, options: Optional[ReaderOptions] = None) -> None:
        self.options = options if options is not None else ReaderOptions()
        self._text = TextDecoder(source, encoding=self.options.encoding, chunk_size=self.options.chunk_size)

        self._mode = ParseMode.UNQUOTED
        self._field: List[str] = []
        self._record: Record = []
        self._has_content = False
        self._exhausted = False

        self.line_num = 0
        self.records_read = 0

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        row = self.next_row()
        if row is None:
            raise StopIteration
        return row

    def next_row(self) -> Optional[Record]:
        """
        Parse and return the next record.

        Returns:
            A new list of field strings, or None once the input is
            exhausted. Calling again after None keeps returning None.

        Raises:
            CSVDecodeError: If the source cannot be read or decoded at all
        """
        if self._exhausted:
            return None

        while True:
            c = self._text.read_char()
            if c is None:
                self._exhausted = True
                if not self._has_content:
                    return None
                if self._mode is ParseMode.QUOTED:
                    logger.debug("End of input inside quoted field on line %d; closing it", self.line_num + 1)
                return self._finish_record()

            if c == self.options.terminator:
                self.line_num += 1

            if self._mode is ParseMode.QUOTED:
                self._process_quoted(c)
            elif self._process_unquoted(c):
                return self._finish_record()

    def _process_unquoted(self, c: str) -> bool:
        """Handle one character outside an enclosure. Returns True at end of record."""
        opts = self.options

        if c == opts.delimiter:
            self._has_content = True
            self._close_field()
        elif c == opts.terminator:
            return True
        elif c == opts.enclosure and not self._field:
            self._has_content = True
            self._mode = ParseMode.QUOTED
        elif c == CARRIAGE_RETURN:
            pass
        else:
            self._has_content = True
            self._field.append(c)
        return False

    def _process_quoted(self, c: str) -> None:
        """Handle one character inside an enclosure."""
        enclosure = self.options.enclosure

        if c != enclosure:
            self._field.append(c)
        elif self._text.peek() == enclosure:
            self._text.read_char()
            self._field.append(enclosure)
        else:
            self._mode = ParseMode.UNQUOTED

    def _close_field(self) -> None:
        self._record.append("".join(self._field))
        self._field = []

    def _finish_record(self) -> Record:
        if self._has_content or self.options.empty_lines is EmptyLinePolicy.EMPTY_FIELD:
            self._close_field()

        record = self._record
        self._record = []
        self._field = []
        self._mode = ParseMode.UNQUOTED
        self._has_content = False
        self.records_read += 1
        return record


def read_string(text: str, options: Optional[ReaderOptions] = None) -> List[Record]:
    """
    Parse CSV text into a list of records.

    Args:
        text: CSV content as string
        options: Reader options (defaults if omitted)

    Returns:
        All records in order
    """
    return list(SimpleCsvReader(io.StringIO(text), options))


def read_bytes(data: bytes, options: Optional[ReaderOptions] = None) -> List[Record]:
    """Parse raw CSV bytes, decoding with options.encoding."""
    return list(SimpleCsvReader(io.BytesIO(data), options))


def read_file(filepath: str, options: Optional[ReaderOptions] = None) -> List[Record]:
    """
    Parse a CSV file into a list of records.

    Args:
        filepath: Path to CSV file
        options: Reader options (defaults if omitted)

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVDecodeError: If the file cannot be read or decoded
    """
    try:
        f = open(filepath, "rb")
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    with f:
        return list(SimpleCsvReader(f, options))
