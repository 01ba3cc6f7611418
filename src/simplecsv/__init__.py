"""
simple-csv Package

A streaming, delimiter-configurable tabular-text parser and writer
implementing a relaxed variant of RFC 4180.

ROBUSTNESS GUARANTEE:
---------------------
The reader never rejects structurally malformed input:
    - Unescaped quotes mid-field are literal data
    - Text after a closed quote is appended to the field
    - End of input inside a quoted field closes it

Every byte sequence has a defined parse outcome.
Callers needing strict RFC 4180 validation layer their own checks on top.
"""

from simplecsv.errors import SimpleCsvError, CSVDecodeError, CSVWriteError, DialectError
from simplecsv.model import (
    Dialect,
    EmptyLinePolicy,
    NewlineType,
    ReaderOptions,
    Record,
    WriterOptions,
)
from simplecsv.reader import SimpleCsvReader, read_bytes, read_file, read_string
from simplecsv.writer import SimpleCsvWriter, write_file, write_string

__version__ = "0.1.0"

__all__ = [
    "CSVDecodeError",
    "CSVWriteError",
    "Dialect",
    "DialectError",
    "EmptyLinePolicy",
    "NewlineType",
    "ReaderOptions",
    "Record",
    "SimpleCsvError",
    "SimpleCsvReader",
    "SimpleCsvWriter",
    "WriterOptions",
    "read_bytes",
    "read_file",
    "read_string",
    "write_file",
    "write_string",
]
