"""JSON writer for metadata and chapter records.

``text`` may be a string holding JSON already or any JSON-serializable object;
objects are dumped with ``ensure_ascii=False`` so non-ASCII titles stay
readable.
"""

from __future__ import annotations

import json
import os
from typing import Any

from .txt_writer import write_text


def dumps(data: Any) -> str:
    """Serialize ``data`` the way :func:`write_json` writes it."""

    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def write_json(
    path: str | os.PathLike[str],
    text: Any,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` as JSON."""

    payload = text if isinstance(text, str) else dumps(text)
    write_text(path, payload, encoding=encoding, newline=newline)


__all__ = ["dumps", "write_json"]
