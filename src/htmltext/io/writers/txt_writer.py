"""Writer for extracted plain text.

Extracted text is already normalized, so it is written unchanged: no newline
translation and no trailing newline appended.
"""

from __future__ import annotations

import os
from pathlib import Path


def write_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path``, creating missing parent directories."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding=encoding, newline=newline)


__all__ = ["write_text"]
