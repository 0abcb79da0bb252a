"""Character reference decoding.

Two reference forms are understood:

* named references from the fixed table
  :data:`~htmltext.utils.constants.NAMED_ENTITIES` (``&amp;``, ``&nbsp;``, ...)
* decimal numeric references ``&#<digits>;`` with ASCII digits only

Decoding builds a fresh string with :func:`re.sub`, so replacements of a
different length never disturb the positions of later matches.
:func:`decode_entities` resolves both forms in one left-to-right scan: the
result of one replacement is never decoded again, hence ``&amp;lt;`` becomes
``&lt;`` and not ``<``.

Unknown names and numeric values that are not Unicode scalar values (above
``U+10FFFF`` or inside the surrogate range) are left untouched.
"""

from __future__ import annotations

import re

from ..utils.constants import NAMED_ENTITIES
from ..utils.logging import get_logger

logger = get_logger(__name__)

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)
# Significant digits of the largest code point; longer runs are invalid.
_MAX_DIGITS = len(str(_MAX_CODE_POINT))

_NAMED_ALTERNATION = "|".join(sorted(NAMED_ENTITIES, key=len, reverse=True))
_NAMED_RE = re.compile(rf"&({_NAMED_ALTERNATION});")
_NUMERIC_RE = re.compile(r"&#([0-9]+);")
_ANY_RE = re.compile(rf"&(?:({_NAMED_ALTERNATION})|#([0-9]+));")


def _code_point_to_char(digits: str) -> str | None:
    """Return the character for decimal ``digits`` or ``None`` if invalid."""

    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        logger.debug("leaving oversized numeric reference as text (%d digits)", len(digits))
        return None
    value = int(significant)
    if value > _MAX_CODE_POINT or value in _SURROGATES:
        logger.debug("leaving invalid numeric reference &#%s; as text", digits)
        return None
    return chr(value)


def _replace_numeric(match: re.Match[str]) -> str:
    char = _code_point_to_char(match.group(1))
    return match.group(0) if char is None else char


def decode_named_entities(text: str) -> str:
    """Replace known named references in ``text``."""

    return _NAMED_RE.sub(lambda m: NAMED_ENTITIES[m.group(1)], text)


def decode_numeric_entities(text: str) -> str:
    """Replace decimal numeric references in ``text``.

    >>> decode_numeric_entities("caf&#233;")
    'café'
    """

    return _NUMERIC_RE.sub(_replace_numeric, text)


def _replace_any(match: re.Match[str]) -> str:
    name, digits = match.group(1), match.group(2)
    if name is not None:
        return NAMED_ENTITIES[name]
    char = _code_point_to_char(digits)
    return match.group(0) if char is None else char


def decode_entities(text: str) -> str:
    """Resolve named and numeric references in a single pass."""

    if "&" not in text:
        return text
    return _ANY_RE.sub(_replace_any, text)


__all__ = ["decode_entities", "decode_named_entities", "decode_numeric_entities"]
