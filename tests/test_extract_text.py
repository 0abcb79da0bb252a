from __future__ import annotations

from htmltext import extract_text


def test_paragraph() -> None:
    assert extract_text("<p>Hello</p>") == "Hello"


def test_script_removed() -> None:
    assert extract_text("<script>evil()</script>Hi") == "Hi"


def test_two_paragraphs_one_blank_line() -> None:
    assert extract_text("<p>A</p><p>B</p>") == "A\n\nB"


def test_named_entities() -> None:
    assert extract_text("Line&nbsp;break&lt;here&gt;") == "Line break<here>"


def test_numeric_entity() -> None:
    assert extract_text("caf&#233;") == "café"


def test_empty_input() -> None:
    assert extract_text("") == ""
    assert extract_text("   \n\n ") == ""


def test_inline_tags_keep_words_together() -> None:
    html = '<p>Some <em>emphasis</em> and a <a href="x.html">link</a>.</p>'
    assert extract_text(html) == "Some emphasis and a link."


def test_br_variants() -> None:
    assert extract_text("a<br>b<br/>c<br />d<BR>e") == "a\nb\nc\nd\ne"


def test_full_document() -> None:
    html = """<?xml version="1.0" encoding="utf-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head>
  <title>Chapter 1</title>
  <style type="text/css">p { margin: 0 }</style>
</head>
<body>
  <h1 class="chapter">Chapter 1</h1>
  <p>It was a   bright cold day in April.</p>
  <ul>
    <li>One</li>
    <li>Two</li>
  </ul>
</body>
</html>"""
    assert extract_text(html) == (
        "Chapter 1\n\nChapter 1\n\nIt was a bright cold day in April.\n\nOne\n\nTwo"
    )


def test_unclosed_script_leaks() -> None:
    assert extract_text("<script>x = 1;") == "x = 1;"


def test_invalid_numeric_entity_left_literal() -> None:
    assert extract_text("bad&#99999999;ref") == "bad&#99999999;ref"


def test_stray_angle_brackets_kept() -> None:
    assert extract_text("1 < 2") == "1 < 2"
    assert extract_text("3 > 2") == "3 > 2"


def test_markup_free_output_is_stable() -> None:
    html = "<div><p>First   para</p>\n\n\n<p>Second &amp; last</p></div>"
    once = extract_text(html)
    assert once == "First para\n\nSecond & last"
    assert extract_text(once) == once


def test_oversized_numeric_reference_does_not_fail() -> None:
    ref = "&#" + "1" * 5000 + ";"
    assert extract_text("x" + ref + "y") == "x" + ref + "y"


def test_arabic_indic_digits_left_literal() -> None:
    assert extract_text("a&#\u0663\u0663;b") == "a&#\u0663\u0663;b"


def test_rerun_on_markup_free_output_is_noop() -> None:
    once = extract_text("<h1>Title</h1><p>caf&#233; &amp; more</p><br/><div>x  y</div>")
    assert extract_text(once) == once


def test_rerun_on_decoded_markup_may_differ() -> None:
    once = extract_text("&lt;b&gt;bold&lt;/b&gt;")
    assert once == "<b>bold</b>"
    assert extract_text(once) == "bold"
