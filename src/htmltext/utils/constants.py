"""Fixed tag and entity tables shared by the pipeline stages.

All tables are immutable.  Tag names are lower case; matching against them is
case-insensitive in the stages that use them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = [
    "CONTENT_ELEMENTS",
    "BLOCK_ELEMENTS",
    "NAMED_ENTITIES",
]

# Elements whose contents never appear as text.
CONTENT_ELEMENTS: tuple[str, ...] = ("script", "style")

BLOCK_ELEMENTS: tuple[str, ...] = (
    "p",
    "div",
    "section",
    "article",
    "header",
    "footer",
    "main",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "dl",
    "dt",
    "dd",
    "blockquote",
    "pre",
    "address",
    "table",
    "tr",
    "td",
    "th",
    "thead",
    "tbody",
    "tfoot",
)

# Entity name (without ``&`` and ``;``) to replacement text.  Curly quote
# entities decode to straight ASCII quotes.
NAMED_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "lt": "<",
        "gt": ">",
        "amp": "&",
        "quot": '"',
        "apos": "'",
        "nbsp": " ",
        "copy": "©",
        "reg": "®",
        "trade": "™",
        "hellip": "…",
        "mdash": "—",
        "ndash": "–",
        "lsquo": "'",
        "rsquo": "'",
        "ldquo": '"',
        "rdquo": '"',
        "times": "×",
        "divide": "÷",
    }
)
