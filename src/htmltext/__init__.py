"""Plain text and metadata extraction from HTML chapter documents.

The public API converts markup into normalized text and scans it for a title
and ``<meta>`` pairs.  Every function is pure and never raises on malformed
markup.  The command line interface lives in :mod:`htmltext.cli`.
"""

from .extract import (
    ChapterText,
    extract_body,
    extract_chapter,
    extract_metadata,
    extract_text,
    extract_title,
)
from .options import DEFAULT_OPTIONS, MINIMAL_OPTIONS, PRESETS, ExtractionOptions, get_preset

__version__ = "0.1.0"

__all__ = [
    "ChapterText",
    "ExtractionOptions",
    "DEFAULT_OPTIONS",
    "MINIMAL_OPTIONS",
    "PRESETS",
    "get_preset",
    "extract_text",
    "extract_title",
    "extract_metadata",
    "extract_body",
    "extract_chapter",
    "__version__",
]
