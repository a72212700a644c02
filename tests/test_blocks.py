"""Tests for the block sectionizer."""

from __future__ import annotations

import pytest

from simple_markdown.blocks import (
    BASE_FONT_SIZE,
    BlankLine,
    Heading,
    HorizontalRule,
    ListItem,
    Paragraph,
    Quote,
    heading_font_size,
    sectionize,
)

# === headings ===


def test_heading_levels_and_titles() -> None:
    assert sectionize("# Title\n## Sub\n### Subsub") == [
        Heading(1, "Title"),
        Heading(2, "Sub"),
        Heading(3, "Subsub"),
    ]


def test_heading_requires_hash_at_column_zero() -> None:
    """Indented hashes are not headings."""
    assert sectionize("  # not a heading") == [Paragraph(("  # not a heading",))]


def test_deep_heading_keeps_level() -> None:
    assert sectionize("##### Deep") == [Heading(5, "Deep")]


@pytest.mark.parametrize(
    ("level", "multiplier"),
    [(1, 1.6), (2, 1.6 * 1.4), (3, 1.6 * 1.4 * 1.2), (4, 1.6 * 1.4 * 1.2), (6, 1.6 * 1.4 * 1.2)],
)
def test_heading_font_size_cascade(level: int, multiplier: float) -> None:
    """Multipliers accumulate level by level; deeper levels use all three."""
    assert heading_font_size(level) == pytest.approx(BASE_FONT_SIZE * multiplier)
    assert heading_font_size(level, base=10) == pytest.approx(10 * multiplier)


def test_heading_block_font_size() -> None:
    assert Heading(2, "x").font_size == pytest.approx(14 * 1.6 * 1.4)


# === quotes ===


def test_consecutive_quote_lines_merge() -> None:
    blocks = sectionize("> first\n> second\nafter")
    assert blocks == [Quote(("first", "second")), Paragraph(("after",))]
    assert blocks[0].text == "first second"


def test_quote_after_other_block_starts_new_quote() -> None:
    assert sectionize("> a\n\n> b") == [Quote(("a",)), BlankLine(), Quote(("b",))]


def test_indented_quote_marker() -> None:
    assert sectionize("   >quoted") == [Quote(("quoted",))]


def test_quote_strips_only_a_following_space() -> None:
    """Text directly after the marker keeps its first character."""
    assert sectionize(">text") == [Quote(("text",))]
    assert sectionize(">  two spaces") == [Quote((" two spaces",))]


# === list items ===


def test_list_items_are_separate_blocks() -> None:
    assert sectionize("* one\n- two\n  * three") == [
        ListItem("one"),
        ListItem("two"),
        ListItem("three"),
    ]


def test_emphasis_is_not_a_list_item() -> None:
    """A marker without following whitespace starts a paragraph."""
    assert sectionize("**bold** start") == [Paragraph(("**bold** start",))]


# === horizontal rules ===


@pytest.mark.parametrize("line", ["--", "---", "  -----  "])
def test_horizontal_rule(line: str) -> None:
    assert sectionize(line) == [HorizontalRule()]


def test_single_hyphen_is_paragraph() -> None:
    assert sectionize("-") == [Paragraph(("-",))]


# === blank lines ===


def test_blank_line_run_collapses() -> None:
    assert sectionize("a\n\n\n\nb") == [Paragraph(("a",)), BlankLine(), Paragraph(("b",))]


def test_whitespace_only_lines_are_blank() -> None:
    assert sectionize("a\n   \n\t\nb") == [Paragraph(("a",)), BlankLine(), Paragraph(("b",))]


def test_leading_blank_lines_are_dropped() -> None:
    assert sectionize("\n\nfirst") == [Paragraph(("first",))]


def test_empty_text_has_no_blocks() -> None:
    assert sectionize("") == []


# === paragraphs ===


def test_paragraph_lines_merge() -> None:
    blocks = sectionize("one\ntwo\nthree")
    assert blocks == [Paragraph(("one", "two", "three"))]
    assert blocks[0].text == "one two three"


def test_paragraph_ends_at_other_block() -> None:
    assert sectionize("text\n# Head\nmore") == [
        Paragraph(("text",)),
        Heading(1, "Head"),
        Paragraph(("more",)),
    ]


def test_sectionize_joined_paragraph_is_idempotent() -> None:
    """Re-sectionizing a paragraph's joined text yields the same text."""
    (first,) = sectionize("alpha *beta*\ngamma\n  delta")
    assert isinstance(first, Paragraph)
    (again,) = sectionize(first.text)
    assert isinstance(again, Paragraph)
    assert again.text == first.text


def test_blocks_without_content_have_empty_text() -> None:
    assert HorizontalRule().text == ""
    assert BlankLine().text == ""
