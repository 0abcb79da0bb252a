"""Generic tag removal."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]+>")


def remove_tags(html: str) -> str:
    """Drop every ``<...>`` tag, keeping the text between tags verbatim.

    Entity references are left for the entity decoder.  A lone ``<`` or ``>``
    that does not form a tag stays in the text.
    """

    return _TAG_RE.sub("", html)


__all__ = ["remove_tags"]
