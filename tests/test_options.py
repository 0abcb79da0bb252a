from __future__ import annotations

import pytest
from pydantic import ValidationError

from htmltext import (
    DEFAULT_OPTIONS,
    MINIMAL_OPTIONS,
    PRESETS,
    ExtractionOptions,
    extract_text,
    get_preset,
)


def test_presets() -> None:
    assert DEFAULT_OPTIONS.preserve_line_breaks is True
    assert DEFAULT_OPTIONS.preserve_paragraphs is True
    assert DEFAULT_OPTIONS.extract_links is False
    assert DEFAULT_OPTIONS.extract_images is False
    assert DEFAULT_OPTIONS.max_text_length is None
    assert MINIMAL_OPTIONS.preserve_line_breaks is False
    assert MINIMAL_OPTIONS.preserve_paragraphs is False
    assert dict(PRESETS) == {"default": DEFAULT_OPTIONS, "minimal": MINIMAL_OPTIONS}


def test_get_preset() -> None:
    assert get_preset("Minimal") is MINIMAL_OPTIONS
    with pytest.raises(KeyError):
        get_preset("fancy")


def test_options_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_OPTIONS.preserve_paragraphs = False  # type: ignore[misc]


def test_options_reject_unknown_and_bad_length() -> None:
    with pytest.raises(ValidationError):
        ExtractionOptions(unknown=True)  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        ExtractionOptions(max_text_length=0)


def test_default_equals_unconfigured() -> None:
    html = "<h1>T</h1><p>a<br>b</p>"
    assert extract_text(html, DEFAULT_OPTIONS) == extract_text(html) == "T\n\na\nb"


def test_minimal_single_line() -> None:
    assert extract_text("<h1>T</h1><p>a<br>b</p>", MINIMAL_OPTIONS) == "T a b"


def test_line_breaks_only() -> None:
    opts = ExtractionOptions(preserve_paragraphs=False)
    assert extract_text("<p>a<br>b</p><p>c</p>", opts) == "a\nb c"


def test_max_text_length() -> None:
    opts = ExtractionOptions(max_text_length=7)
    assert extract_text("<p>Hello</p><p>World</p>", opts) == "Hello"
    assert extract_text("<p>Hi</p>", opts) == "Hi"


def test_reserved_flags_have_no_effect() -> None:
    html = '<p><a href="x">link</a> <img src="i.png" alt="pic"/></p>'
    opts = ExtractionOptions(extract_links=True, extract_images=True)
    assert extract_text(html, opts) == extract_text(html) == "link"


def test_minimal_folds_source_newlines() -> None:
    html = "<p>first\nline</p>\n\n<p>second</p>"
    assert extract_text(html, MINIMAL_OPTIONS) == "first line second"
    assert extract_text(html) == "first\nline\n\nsecond"
