"""Render parse results as Rich renderables.

Handles: headings, quotes, list items, horizontal rules, blank lines,
paragraphs, bold/italic runs and link values from inline rules.
Bare http(s) URLs inside plain text are styled as links as well.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from rich.console import Group
from rich.protocol import is_renderable
from rich.rule import Rule
from rich.style import Style
from rich.text import Text

from simple_markdown.blocks import BlankLine, Heading, HorizontalRule, ListItem, Paragraph, Quote
from simple_markdown.inline import Link, Replaced
from simple_markdown.parser import parse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import RenderableType

    from simple_markdown.emphasis import StyledRun
    from simple_markdown.parser import Node, Section

logger = logging.getLogger(__name__)

BARE_URL = re.compile(r"https?://[^\s<>\"]+[^\s<>\".,;:!?)]")
BULLET = " ● "
QUOTE_GUTTER = "  │ "
HEADING_STYLES = {1: "bold underline", 2: "bold", 3: "bold dim"}


def link_style(url: str) -> Style:
    """Style for a clickable link; clicks run the app's open_link action."""
    return Style(color="blue", underline=True, link=url) + Style.from_meta(
        {"@click": f"app.open_link({url!r})"}
    )


def render_runs(runs: Sequence[StyledRun]) -> Text:
    """Convert styled runs to a single Text."""
    text = Text()
    for run in runs:
        start = len(text)
        text.append(
            run.text,
            style=Style(italic=run.style.italic or None, bold=run.style.bold or None),
        )
        for match in BARE_URL.finditer(run.text):
            text.stylize(link_style(match.group(0)), start + match.start(), start + match.end())
    return text


def render_section(section: Section) -> RenderableType | None:
    """Render one section; returns None for block types it does not know."""
    block = section.block
    match block:
        case Paragraph():
            return render_runs(section.runs)
        case Quote():
            text = Text(QUOTE_GUTTER, style="dim")
            text.append_text(render_runs(section.runs))
            return text
        case ListItem():
            text = Text(BULLET)
            text.append_text(render_runs(section.runs))
            return text
        case HorizontalRule():
            return Rule(style="dim")
        case BlankLine():
            return Text()
        case Heading(level=level):
            text = render_runs(section.runs)
            text.stylize(HEADING_STYLES.get(min(level, 3), "bold"))
            return text
        case _:
            logger.error("Invalid block type: %r", block)
            return None


def render_value(value: Any) -> RenderableType:
    """Render a value produced by an inline rule builder."""
    if isinstance(value, Link):
        return Text(value.label, style=link_style(value.url))
    if isinstance(value, Text):
        return value.copy()
    if isinstance(value, str):
        return Text(value)
    if is_renderable(value):
        return value
    logger.warning("Cannot render replacement value %r, using str()", value)
    return Text(str(value))


def _continues_line(section: Section) -> bool:
    return isinstance(section.block, (Paragraph, Quote, ListItem, Heading))


def render_nodes(nodes: Sequence[Node]) -> Group:
    """Render a parse result; inline values stay on the line they belong to."""
    lines: list[RenderableType] = []
    open_line = False  # lines[-1] is a Text that inline content may extend

    def extend(renderable: RenderableType) -> bool:
        if open_line and isinstance(renderable, Text) and isinstance(lines[-1], Text):
            lines[-1].append_text(renderable)
            return True
        return False

    for node in nodes:
        if isinstance(node, Replaced):
            value = render_value(node.value)
            if not extend(value):
                lines.append(value)
            open_line = isinstance(value, Text)
            continue

        # Only text that starts on the same source line continues it
        same_line = "\n" not in node.text[: len(node.text) - len(node.text.lstrip())]
        for i, section in enumerate(node.sections):
            rendered = render_section(section)
            if rendered is None:
                open_line = False
                continue
            joins = i == 0 and same_line and isinstance(section.block, Paragraph)
            if not (joins and extend(rendered)):
                lines.append(rendered)
            open_line = isinstance(rendered, Text) and _continues_line(section)
        if node.text.endswith("\n"):
            open_line = False
    return Group(*lines)


def render_markdown(text: str, *, font_scale: float = 1.0) -> Group:
    """Parse and render ``text`` with the default rules only."""
    return render_nodes(parse(text, font_scale=font_scale))
