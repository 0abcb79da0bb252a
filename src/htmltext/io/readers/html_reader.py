"""Chapter document reader.

:func:`read_html` returns the raw markup of a chapter file; extraction is left
to :mod:`htmltext.extract`.  A UTF-8 byte-order mark is consumed, newlines are
kept exactly as stored, and undecodable bytes are replaced rather than raising
since chapter files in the wild are not always clean UTF-8.  Missing files
raise ``FileNotFoundError``.
"""

from __future__ import annotations

import os
from pathlib import Path


def read_html(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "replace",
) -> str:
    """Return the markup stored at ``path``."""

    with Path(path).open("r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_html"]
