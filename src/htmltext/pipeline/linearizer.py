"""Block-level tag linearization.

Opening and closing tags of the elements in
:data:`~htmltext.utils.constants.BLOCK_ELEMENTS` are replaced with a
separator, as are all ``<br>`` variants.  Tag identity is exact: ``<p>`` does
not match ``<pre>`` or ``<param>``.  This stage runs before
:func:`~htmltext.pipeline.tags.remove_tags` so that line structure comes from
tag names rather than from whatever whitespace happened to sit in the markup.
"""

from __future__ import annotations

import re

from ..utils.constants import BLOCK_ELEMENTS

_NAMES = "|".join(BLOCK_ELEMENTS)

# Opening (attributes or self-closing slash allowed) and closing tags.
_BLOCK_TAG_RE = re.compile(rf"</?(?:{_NAMES})(?:[\s/][^>]*)?>", re.IGNORECASE)

# <br>, <br/>, <br />, <BR clear="all">
_BR_RE = re.compile(r"<br(?:[\s/][^>]*)?>", re.IGNORECASE)

_SOURCE_BREAK_RE = re.compile(r"\r\n|[\r\n]")


def linearize_blocks(
    html: str,
    *,
    block_separator: str = "\n",
    line_break_separator: str = "\n",
    fold_source_breaks: bool = False,
) -> str:
    """Replace block-level and ``<br>`` tags in ``html``.

    Parameters
    ----------
    html:
        Markup with script/style content already removed.
    block_separator:
        Text emitted for each block-level opening or closing tag.
    line_break_separator:
        Text emitted for each ``<br>`` tag.
    fold_source_breaks:
        Turn newlines already present in the markup into spaces before any
        tag is replaced, so that only tag-derived breaks survive.
    """

    text = _SOURCE_BREAK_RE.sub(" ", html) if fold_source_breaks else html
    text = _BLOCK_TAG_RE.sub(block_separator, text)
    return _BR_RE.sub(line_break_separator, text)


__all__ = ["linearize_blocks"]
