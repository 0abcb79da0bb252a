from __future__ import annotations

import pytest

from htmltext.pipeline import decode_entities, decode_named_entities, decode_numeric_entities
from htmltext.utils.constants import NAMED_ENTITIES


@pytest.mark.parametrize(
    ("encoded", "decoded"),
    [
        ("&lt;", "<"),
        ("&gt;", ">"),
        ("&amp;", "&"),
        ("&quot;", '"'),
        ("&apos;", "'"),
        ("&nbsp;", " "),
        ("&copy;", "©"),
        ("&reg;", "®"),
        ("&trade;", "™"),
        ("&hellip;", "…"),
        ("&mdash;", "—"),
        ("&ndash;", "–"),
        ("&lsquo;", "'"),
        ("&rsquo;", "'"),
        ("&ldquo;", '"'),
        ("&rdquo;", '"'),
        ("&times;", "×"),
        ("&divide;", "÷"),
    ],
)
def test_named_table(encoded: str, decoded: str) -> None:
    assert decode_entities(encoded) == decoded


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        NAMED_ENTITIES["euro"] = "€"  # type: ignore[index]


def test_unknown_named_left_alone() -> None:
    assert decode_entities("&euro; &foo;") == "&euro; &foo;"


def test_numeric_variable_length_replacements() -> None:
    assert decode_numeric_entities("&#65;&#128512;&#233;x&#10;") == "A\U0001f600éx\n"


def test_numeric_invalid_left_literal() -> None:
    assert decode_numeric_entities("&#55296;") == "&#55296;"
    assert decode_numeric_entities("&#1114112;") == "&#1114112;"
    assert decode_numeric_entities("&#1114111;") == "\U0010ffff"


def test_hex_reference_not_decoded() -> None:
    assert decode_entities("&#x41;") == "&#x41;"


def test_no_double_decoding() -> None:
    assert decode_entities("&amp;lt;") == "&lt;"
    assert decode_entities("&#38;amp;") == "&amp;"
    assert decode_entities("&amp;#233;") == "&#233;"


def test_separate_passes() -> None:
    assert decode_named_entities("&copy; &#169;") == "© &#169;"
    assert decode_numeric_entities("&copy; &#169;") == "&copy; ©"


def test_text_without_ampersand_unchanged() -> None:
    text = "plain text"
    assert decode_entities(text) is text


def test_overlong_numeric_reference_left_literal() -> None:
    ref = "&#" + "1" * 5000 + ";"
    assert decode_entities(ref) == ref
    assert decode_numeric_entities("x" + ref + "y") == "x" + ref + "y"


def test_leading_zeros_still_decoded() -> None:
    assert decode_entities("&#0000065;") == "A"
    assert decode_entities("&#" + "0" * 40 + "66;") == "B"


def test_non_ascii_digits_not_decoded() -> None:
    ref = "&#\u0663\u0663;"
    assert decode_entities(ref) == ref
    assert decode_numeric_entities(ref) == ref
