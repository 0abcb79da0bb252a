"""Removal of elements whose contents must never appear as text.

Each element in :data:`~htmltext.utils.constants.CONTENT_ELEMENTS` is removed
together with everything up to its matching closing tag.  Matching is
non-greedy, so two separate ``<script>`` blocks are removed individually and
the text between them survives.  An opening tag without a closing tag is left
in place; the tag remover later drops the tag itself and its contents leak
into the output.

HTML comments are removed here as well.  Doing it before tag removal keeps a
``>`` inside a comment from leaving comment text behind.
"""

from __future__ import annotations

import re

from ..utils.constants import CONTENT_ELEMENTS

_ELEMENT_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"<{name}(?:[\s/][^>]*)?>.*?</{name}\s*>", re.IGNORECASE | re.DOTALL)
    for name in CONTENT_ELEMENTS
)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def strip_content_elements(html: str) -> str:
    """Return ``html`` without script/style elements and comments."""

    text = html
    for pattern in _ELEMENT_PATTERNS:
        text = pattern.sub("", text)
    return _COMMENT_RE.sub("", text)


__all__ = ["strip_content_elements"]
