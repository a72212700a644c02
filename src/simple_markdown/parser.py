"""Parse pipeline: inline rules, then blocks, then emphasis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from simple_markdown.blocks import BlankLine, HorizontalRule, sectionize
from simple_markdown.emphasis import emphasize
from simple_markdown.inline import RawText, Replaced, split_inline, with_defaults

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simple_markdown.blocks import Block
    from simple_markdown.emphasis import StyledRun
    from simple_markdown.inline import InlineRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Section:
    """A block together with its resolved emphasis runs."""

    block: Block
    runs: tuple[StyledRun, ...] = ()


@dataclass(frozen=True, slots=True)
class TextFragment:
    """Text between two replaced values, split into sections."""

    text: str
    sections: tuple[Section, ...]


Node: TypeAlias = TextFragment | Replaced


def parse_sections(text: str) -> tuple[Section, ...]:
    """Sectionize ``text`` and resolve emphasis for every text-bearing block."""
    return tuple(_section(block) for block in sectionize(text))


def _section(block: Block) -> Section:
    if isinstance(block, (HorizontalRule, BlankLine)):
        return Section(block)
    return Section(block, tuple(emphasize(block.text)))


def parse(
    text: str,
    rules: Iterable[InlineRule] = (),
    *,
    font_scale: float = 1.0,
) -> list[Node]:
    """Parse ``text`` into an ordered list of fragments and replaced values.

    ``rules`` run after the default link and autolink rules. ``font_scale``
    is handed to the rule builders as-is.
    """
    nodes: list[Node] = []
    for segment in split_inline(text, with_defaults(rules), font_scale):
        if isinstance(segment, RawText):
            nodes.append(TextFragment(segment.text, parse_sections(segment.text)))
        else:
            nodes.append(segment)
    logger.debug(
        "Parsed %d node(s), %d section(s)",
        len(nodes),
        sum(len(n.sections) for n in nodes if isinstance(n, TextFragment)),
    )
    return nodes

