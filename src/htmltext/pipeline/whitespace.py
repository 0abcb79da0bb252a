"""Whitespace normalization for extracted text.

Rules, applied in order:

1. Runs of two or more plain spaces collapse to one space.
2. Every line is stripped of leading and trailing whitespace.  Line
   boundaries are ``\\r\\n``, ``\\n``, ``\\r``, ``U+0085``, ``U+2028`` and
   ``U+2029``; lines are rejoined with ``\\n``.
3. Three or more consecutive newlines collapse to exactly two, leaving at
   most one blank line between paragraphs.
4. Leading and trailing whitespace of the whole text is removed.

Tabs and other horizontal whitespace inside a line are kept.  The function is
idempotent: normalizing its own output returns it unchanged.
"""

from __future__ import annotations

import re

_SPACE_RUN_RE = re.compile(r" {2,}")
_LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\x85\u2028\u2029]")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_whitespace(text: str) -> str:
    """Return ``text`` with spaces and blank lines collapsed and trimmed."""

    text = _SPACE_RUN_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in _LINE_BREAK_RE.split(text))
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


__all__ = ["normalize_whitespace"]
