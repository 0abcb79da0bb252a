"""Extension based registry for file I/O.

Readers are registered for ``.html``, ``.htm`` and ``.xhtml`` chapter files and
for ``.txt``; writers for ``.txt`` and ``.json``.  The registry dispatches
based on the file extension and performs no content normalization.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.html_reader import read_html
from .writers.json_writer import write_json
from .writers.txt_writer import write_text

# Readers take a path plus keyword options such as ``encoding``; writers take
# a path, the payload and keyword options.
ReaderFunc = Callable[..., str]
WriterFunc = Callable[..., None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".html"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], text: Any, **kwargs: Any) -> None:
    """Write ``text`` to ``path`` using the registered writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, text, **kwargs)


for _ext in (".html", ".htm", ".xhtml", ".txt"):
    register_reader(_ext, read_html)
register_writer(".txt", write_text)
register_writer(".json", write_json)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
