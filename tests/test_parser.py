"""Tests for the full parse pipeline."""

from __future__ import annotations

import re

from simple_markdown.blocks import BlankLine, Heading, HorizontalRule, ListItem, Paragraph, Quote
from simple_markdown.emphasis import Style, StyledRun
from simple_markdown.inline import InlineRule, Link, Replaced
from simple_markdown.parser import Section, TextFragment, parse, parse_sections
from tests.conftest import SAMPLE_DOCUMENT


def test_parse_plain_text() -> None:
    assert parse("hello") == [
        TextFragment("hello", (Section(Paragraph(("hello",)), (StyledRun("hello"),)),)),
    ]


def test_parse_empty_text() -> None:
    """Empty input is one fragment without sections."""
    assert parse("") == [TextFragment("", ())]


def test_parse_splits_around_links() -> None:
    nodes = parse("go [here](http://x/) *now*")
    assert nodes == [
        TextFragment("go ", (Section(Paragraph(("go ",)), (StyledRun("go "),)),)),
        Replaced(Link("here", "http://x/")),
        TextFragment(
            " *now*",
            (Section(Paragraph((" *now*",)), (StyledRun(" "), StyledRun("now", Style(italic=True)))),),
        ),
    ]


def test_parse_caller_rules_follow_defaults() -> None:
    rule = InlineRule(re.compile(r"@(\w+)"), lambda m, scale: ("user", m.group(1), scale))
    nodes = parse("hi @bob", [rule], font_scale=1.5)
    assert nodes[-1] == Replaced(("user", "bob", 1.5))


def test_sections_without_content_have_no_runs() -> None:
    assert parse_sections("a\n\n---") == (
        Section(Paragraph(("a",)), (StyledRun("a"),)),
        Section(BlankLine()),
        Section(HorizontalRule()),
    )


def test_heading_title_gets_emphasis() -> None:
    (section,) = parse_sections("## A **b**")
    assert section.block == Heading(2, "A **b**")
    assert section.runs == (StyledRun("A "), StyledRun("b", Style(bold=True)))


def test_quote_lines_joined_before_emphasis() -> None:
    """Emphasis can span the lines of a merged quote."""
    (section,) = parse_sections("> *one\n> two*")
    assert section.block == Quote(("*one", "two*"))
    assert section.runs == (StyledRun("one two", Style(italic=True)),)


def test_parse_sample_document() -> None:
    nodes = parse(SAMPLE_DOCUMENT)
    kinds = [type(n).__name__ for n in nodes]
    assert kinds == ["TextFragment", "Replaced", "TextFragment", "Replaced", "TextFragment"]

    first = nodes[0]
    assert isinstance(first, TextFragment)
    blocks = [s.block for s in first.sections]
    assert blocks[:6] == [
        Heading(1, "Title"),
        BlankLine(),
        Heading(2, "Subtitle"),
        BlankLine(),
        Heading(3, "Subsubtitle"),
        BlankLine(),
    ]
    assert Quote(("Quote without formattings (for now)", "Second line")) in blocks
    assert ListItem("List item #1") in blocks
    assert HorizontalRule() in blocks
    assert blocks[-1] == Paragraph(("This is an ",))

    assert nodes[1] == Replaced(Link("example link", "http://example.com/"))
    assert nodes[3] == Replaced(Link("http://example.org/", "http://example.org/"))


def test_parse_is_independent_between_calls() -> None:
    rule = InlineRule("x", lambda _m, _s: "X")
    assert parse("x", [rule]) == [Replaced("X")]
    assert parse("x") == [TextFragment("x", (Section(Paragraph(("x",)), (StyledRun("x"),)),))]
