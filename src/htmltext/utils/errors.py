"""Typed exceptions for I/O formats."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
