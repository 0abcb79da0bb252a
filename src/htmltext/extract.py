"""HTML to plain text extraction.

:func:`extract_text` runs the stages of :mod:`htmltext.pipeline` in their
fixed order.  :func:`extract_title`, :func:`extract_metadata` and
:func:`extract_body` are independent read-only scans of the original markup.
None of the functions raise on malformed input; they degrade to a best-effort
result instead.

Example
-------

>>> extract_text("<p>A</p><p>B</p>")
'A\\n\\nB'
>>> extract_title("<h2>Chapter One</h2><p>text</p>")
'Chapter One'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .options import DEFAULT_OPTIONS, ExtractionOptions
from .pipeline import (
    decode_entities,
    linearize_blocks,
    normalize_whitespace,
    remove_tags,
    strip_content_elements,
)
from .utils.logging import get_logger

logger = get_logger(__name__)

_TITLE_RE = re.compile(r"<title(?:\s[^>]*)?>.*?</title\s*>", re.IGNORECASE | re.DOTALL)
_HEADING_RE = re.compile(
    r"<(h[1-6])(?:\s[^>]*)?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_BODY_RE = re.compile(r"<body(?:\s[^>]*)?>(.*?)</body\s*>", re.IGNORECASE | re.DOTALL)

_META_RE = re.compile(r"<meta\s[^>]*>", re.IGNORECASE)
_META_NAME_RE = re.compile(
    r"(?<![\w:-])name\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE
)
_META_CONTENT_RE = re.compile(
    r"(?<![\w:-])content\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE
)


@dataclass(slots=True, frozen=True)
class ChapterText:
    """Text, title and metadata extracted from one chapter document.

    Attributes
    ----------
    order:
        Zero-based position of the chapter in its book.
    title:
        Document title, or ``"Chapter <order + 1>"`` when none was found.
    text:
        Normalized plain text.
    metadata:
        ``<meta>`` name/content pairs.
    """

    order: int
    title: str
    text: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def char_count(self) -> int:
        """Return the length of :attr:`text` in characters."""

        return len(self.text)


def _truncate(text: str, limit: int | None) -> str:
    if limit is None or len(text) <= limit:
        return text
    logger.debug("truncating extracted text from %d to %d characters", len(text), limit)
    return text[:limit].rstrip()


def extract_text(html: str, options: ExtractionOptions | None = None) -> str:
    """Convert ``html`` to normalized plain text.

    Parameters
    ----------
    html:
        Arbitrary, possibly malformed markup.
    options:
        Extraction options.  ``None`` selects
        :data:`~htmltext.options.DEFAULT_OPTIONS`.

    Returns
    -------
    str
        Text with single spaces between words, at most one blank line between
        blocks and no surrounding whitespace.  Empty input gives ``""``.
    """

    opts = options if options is not None else DEFAULT_OPTIONS
    if not html:
        return ""

    text = strip_content_elements(html)
    text = linearize_blocks(
        text,
        block_separator=opts.block_separator,
        line_break_separator=opts.line_break_separator,
        fold_source_breaks=opts.fold_source_breaks,
    )
    text = remove_tags(text)
    text = decode_entities(text)
    text = normalize_whitespace(text)
    return _truncate(text, opts.max_text_length)


def _first_text(pattern: re.Pattern[str], html: str) -> str | None:
    match = pattern.search(html)
    if match is None:
        return None
    return extract_text(match.group(0)) or None


def extract_title(html: str) -> str | None:
    """Return the document title of ``html`` or ``None``.

    The first ``<title>`` element wins.  When it is missing or has no text, the
    first ``<h1>``..``<h6>`` element in document order is used, whatever its
    level.
    """

    title = _first_text(_TITLE_RE, html)
    if title is not None:
        return title
    return _first_text(_HEADING_RE, html)


def extract_metadata(html: str) -> dict[str, str]:
    """Return ``<meta name=... content=...>`` pairs found in ``html``.

    Tags lacking either attribute are skipped.  For repeated names the last
    tag wins.  Values are returned as written, without entity decoding.
    """

    metadata: dict[str, str] = {}
    for tag in _META_RE.finditer(html):
        name = _META_NAME_RE.search(tag.group(0))
        content = _META_CONTENT_RE.search(tag.group(0))
        if name is None or content is None:
            continue
        metadata[name.group(1).strip()] = content.group(1).strip()
    return metadata


def extract_body(html: str) -> list[str]:
    """Return the inner markup of every ``<body>`` element, in order."""

    return [match.group(1) for match in _BODY_RE.finditer(html)]


def extract_chapter(
    html: str,
    *,
    order: int = 0,
    options: ExtractionOptions | None = None,
) -> ChapterText:
    """Build a :class:`ChapterText` for one chapter document."""

    title = extract_title(html)
    return ChapterText(
        order=order,
        title=title if title is not None else f"Chapter {order + 1}",
        text=extract_text(html, options),
        metadata=extract_metadata(html),
    )


__all__ = [
    "ChapterText",
    "extract_text",
    "extract_title",
    "extract_metadata",
    "extract_body",
    "extract_chapter",
]
