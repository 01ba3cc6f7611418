"""Exceptions raised by simplecsv."""


class SimpleCsvError(Exception):
    """Base class for all simplecsv errors."""
    pass


class CSVDecodeError(SimpleCsvError):
    """
    Raised when the byte-to-text step cannot proceed at all.

    Invalid encoding is NOT a decode error: undecodable bytes are
    replaced with U+FFFD and parsing continues.
    """
    pass


class CSVWriteError(SimpleCsvError):
    """Raised when the output sink rejects a write."""
    pass


class DialectError(SimpleCsvError):
    """Raised when a dialect configuration file cannot be loaded."""
    pass
