"""
Record writer (Records -> Output Sink).

Serializes records as RFC 4180 text:
    - A field is enclosed if it contains the delimiter, the enclosure,
      the terminator, or a line break
    - Enclosures inside an enclosed field are doubled
    - Fields are joined by the delimiter, records by the terminator

The writer never fails because of field content, only because the sink
rejects a write. Nothing is rolled back on failure.
"""
from __future__ import annotations

import io
import logging
from typing import Any, Iterable, Optional, Sequence

from simplecsv.errors import CSVWriteError
from simplecsv.model import WriterOptions

logger = logging.getLogger(__name__)

LINE_BREAKS = ("\n", "\r")


def needs_quoting(field: str, options: WriterOptions) -> bool:
    """Return True if the field must be enclosed to survive a round trip."""
    if options.delimiter in field or options.enclosure in field:
        return True
    if options.terminator in field:
        return True
    return any(c in field for c in LINE_BREAKS)


def format_field(field: str, options: WriterOptions) -> str:
    if not needs_quoting(field, options):
        return field
    enclosure = options.enclosure
    return enclosure + field.replace(enclosure, enclosure * 2) + enclosure


def format_row(row: Sequence[str], options: WriterOptions) -> str:
    """
    Render one record without its terminator.

    A record with no fields or a single empty field is written as an
    empty pair of enclosures; a bare empty line at the end of output
    would be lost on reading.
    """
    if not row or (len(row) == 1 and row[0] == ""):
        return options.enclosure * 2
    return options.delimiter.join(format_field(field, options) for field in row)


class SimpleCsvWriter:
    """
    Writes records to a sink.

    Byte sinks (anything with write(bytes)) receive text encoded with
    options.encoding; io.TextIOBase sinks receive text unchanged.

    Example:
        writer = SimpleCsvWriter(io.BytesIO())
        writer.write_all([["1", "2"], ["3", "4,5"]])
        writer.into_inner().getvalue()   # b'1,2\\n3,"4,5"'
    """

    def __init__(self, sink: Any, options: Optional[WriterOptions] = None) -> None:
        self.options = options if options is not None else WriterOptions()
        self._sink = sink
        self._text_sink = isinstance(sink, io.TextIOBase)
        self._row_written = False
        self.rows_written = 0

    def write(self, row: Sequence[str]) -> None:
        """
        Write one record.

        Raises:
            CSVWriteError: If the sink rejects the write
        """
        terminator = self.options.terminator
        line = format_row(row, self.options)

        if self.options.trailing_terminator:
            line = line + terminator
        elif self._row_written:
            line = terminator + line

        self._emit(line)
        self._row_written = True
        self.rows_written += 1

    def write_all(self, rows: Iterable[Sequence[str]]) -> None:
        for row in rows:
            self.write(row)

    def into_inner(self) -> Any:
        """Return the underlying sink."""
        return self._sink

    def _emit(self, text: str) -> None:
        if self._text_sink:
            data = text
        else:
            data = text.encode(self.options.encoding, errors="replace")

        try:
            self._sink.write(data)
        except (OSError, ValueError) as e:
            # ValueError: write to a closed sink
            logger.debug("Sink rejected write after %d rows", self.rows_written)
            raise CSVWriteError(f"Failed to write record {self.rows_written + 1}: {e}") from e


def write_string(rows: Iterable[Sequence[str]], options: Optional[WriterOptions] = None) -> str:
    """
    Serialize records to a CSV string.

    Args:
        rows: Records to write
        options: Writer options (defaults if omitted)
    """
    writer = SimpleCsvWriter(io.StringIO(), options)
    writer.write_all(rows)
    return writer.into_inner().getvalue()


def write_file(filepath: str, rows: Iterable[Sequence[str]], options: Optional[WriterOptions] = None) -> None:
    """
    Write records to a file, replacing its contents.

    Raises:
        CSVWriteError: If the file cannot be written
    """
    try:
        f = open(filepath, "wb")
    except OSError as e:
        raise CSVWriteError(f"Cannot open {filepath} for writing: {e}") from e

    with f:
        SimpleCsvWriter(f, options).write_all(rows)
