"""
Core Configuration Objects

Defines the immutable configuration consumed by the reader and writer.

These are pure data classes representing:
    - Reader options (delimiter, enclosure, terminator, decoding)
    - Writer options (delimiter, enclosure, newline style, encoding)
    - Dialects (named reader/writer pairs)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about byte sources or sinks
        - Are immutable once constructed
        - Are fully serializable (see simplecsv.serialization)
"""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

# One row: ordered field values, arity varies per record.
Record = List[str]

DEFAULT_CHUNK_SIZE = 4096


class EmptyLinePolicy(Enum):
    """
    What the reader returns for an empty line.

    EMPTY_FIELD: [""] (one empty field)
    NO_FIELDS:   []   (zero fields)
    """
    EMPTY_FIELD = "empty_field"
    NO_FIELDS = "no_fields"


class NewlineType(Enum):
    """Record terminators supported by name."""
    UNIX = "\n"
    WINDOWS = "\r\n"


def _require_single_char(name: str, value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def _warn_if_coinciding(**chars: str) -> None:
    seen = {}
    for name, value in chars.items():
        if value in seen:
            warnings.warn(
                f"{seen[value]} and {name} are both {value!r}; parsing behaviour is implementation-defined",
                UserWarning,
            )
        else:
            seen[value] = name


@dataclass(frozen=True)
class ReaderOptions:
    """
    Configuration for SimpleCsvReader.

    Properties:
        delimiter: Field separator (default ",")
        enclosure: Quote character (default '"')
        terminator: Record terminator (default "\\n")
        encoding: Codec used to decode byte sources (default "utf-8")
        empty_lines: What an empty line parses to
        chunk_size: Bytes requested from the source per read

    INVARIANTS:
        - delimiter, enclosure and terminator are single characters
        - They should be distinct; if not, a UserWarning is issued
          and the reader checks them in a fixed order
          (delimiter, terminator, enclosure)
    """

    delimiter: str = ","
    enclosure: str = '"'
    terminator: str = "\n"
    encoding: str = "utf-8"
    empty_lines: EmptyLinePolicy = EmptyLinePolicy.EMPTY_FIELD
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        _require_single_char("delimiter", self.delimiter)
        _require_single_char("enclosure", self.enclosure)
        _require_single_char("terminator", self.terminator)
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        _warn_if_coinciding(delimiter=self.delimiter, enclosure=self.enclosure, terminator=self.terminator)


@dataclass(frozen=True)
class WriterOptions:
    """
    Configuration for SimpleCsvWriter.

    Properties:
        delimiter: Field separator (default ",")
        enclosure: Quote character (default '"')
        newline: NewlineType or a custom non-empty terminator string
        encoding: Codec used for byte sinks (default "utf-8")
        trailing_terminator: Write the terminator after the last record too
    """

    delimiter: str = ","
    enclosure: str = '"'
    newline: Union[NewlineType, str] = NewlineType.UNIX
    encoding: str = "utf-8"
    trailing_terminator: bool = False

    def __post_init__(self):
        _require_single_char("delimiter", self.delimiter)
        _require_single_char("enclosure", self.enclosure)
        if not isinstance(self.newline, NewlineType):
            if not isinstance(self.newline, str) or not self.newline:
                raise ValueError(f"newline must be a NewlineType or a non-empty string, got {self.newline!r}")
        _warn_if_coinciding(delimiter=self.delimiter, enclosure=self.enclosure)

    @property
    def terminator(self) -> str:
        """The literal string written between records."""
        if isinstance(self.newline, NewlineType):
            return self.newline.value
        return self.newline


@dataclass(frozen=True)
class Dialect:
    """
    A named pair of reader and writer options.

    Keeping both halves together lets one configuration file describe
    how a family of files is read and how it is written back.
    """

    name: str = "default"
    reader: ReaderOptions = field(default_factory=ReaderOptions)
    writer: WriterOptions = field(default_factory=WriterOptions)
