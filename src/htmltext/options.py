"""Extraction options and the two named presets.

:class:`ExtractionOptions` is frozen: instances never change once constructed,
so the presets can be shared freely between callers and threads.

Option effects
--------------
``preserve_paragraphs``
    When ``False`` block-level tags become a space instead of a newline.
``preserve_line_breaks``
    When ``False`` ``<br>`` tags become a space instead of a newline.  With
    both flags ``False`` newlines in the markup source are folded to spaces
    as well, so the result is a single line.
``max_text_length``
    Upper bound on the length of the extracted text.  The cut is followed by
    removal of trailing whitespace so the result stays normalized.
``extract_links`` / ``extract_images``
    Reserved.  Accepted and carried, with no effect on extraction.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, conint


class ExtractionOptions(BaseModel):
    """Immutable configuration record for :func:`htmltext.extract_text`."""

    preserve_line_breaks: bool = True
    preserve_paragraphs: bool = True
    extract_links: bool = False
    extract_images: bool = False
    max_text_length: conint(ge=1) | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def block_separator(self) -> str:
        """Text emitted in place of block-level tags."""

        return "\n" if self.preserve_paragraphs else " "

    @property
    def line_break_separator(self) -> str:
        """Text emitted in place of ``<br>`` tags."""

        return "\n" if self.preserve_line_breaks else " "

    @property
    def fold_source_breaks(self) -> bool:
        """Whether newlines present in the markup are turned into spaces."""

        return not (self.preserve_line_breaks or self.preserve_paragraphs)


DEFAULT_OPTIONS = ExtractionOptions(
    preserve_line_breaks=True,
    preserve_paragraphs=True,
    extract_links=False,
    extract_images=False,
    max_text_length=None,
)

MINIMAL_OPTIONS = ExtractionOptions(
    preserve_line_breaks=False,
    preserve_paragraphs=False,
    extract_links=False,
    extract_images=False,
    max_text_length=None,
)

PRESETS: Mapping[str, ExtractionOptions] = MappingProxyType(
    {"default": DEFAULT_OPTIONS, "minimal": MINIMAL_OPTIONS}
)


def get_preset(name: str) -> ExtractionOptions:
    """Return the preset called ``name``.

    Raises
    ------
    KeyError
        If ``name`` is not a known preset.
    """

    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown preset: {name!r}") from None


__all__ = [
    "ExtractionOptions",
    "DEFAULT_OPTIONS",
    "MINIMAL_OPTIONS",
    "PRESETS",
    "get_preset",
]
