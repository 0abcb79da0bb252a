"""Ordered text extraction stages.

Each stage is a pure ``str -> str`` function.  :data:`STAGES` lists the
canonical order used by :func:`htmltext.extract_text`:

1. :func:`strip_content_elements` removes script/style blocks and comments.
2. :func:`linearize_blocks` turns block-level tags and ``<br>`` into breaks.
3. :func:`remove_tags` drops every remaining tag.
4. :func:`decode_entities` resolves named and numeric references.
5. :func:`normalize_whitespace` collapses spaces and blank lines.
"""

from __future__ import annotations

from typing import Callable

from .entities import decode_entities, decode_named_entities, decode_numeric_entities
from .linearizer import linearize_blocks
from .stripper import strip_content_elements
from .tags import remove_tags
from .whitespace import normalize_whitespace

Stage = Callable[[str], str]

STAGES: tuple[Stage, ...] = (
    strip_content_elements,
    linearize_blocks,
    remove_tags,
    decode_entities,
    normalize_whitespace,
)

__all__ = [
    "Stage",
    "STAGES",
    "strip_content_elements",
    "linearize_blocks",
    "remove_tags",
    "decode_entities",
    "decode_named_entities",
    "decode_numeric_entities",
    "normalize_whitespace",
]
