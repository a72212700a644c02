"""Block sectionizer: classify lines into headings, quotes, list items, etc."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

BASE_FONT_SIZE = 14.0

LIST_ITEM = re.compile(r"^[\-\*]\s+.*")
HORIZONTAL_RULE = re.compile(r"^--+$")


def heading_font_size(level: int, base: float = BASE_FONT_SIZE) -> float:
    """Return the font size for a heading of ``level``.

    The multipliers accumulate: level 1 gets 1.6, level 2 adds 1.4 on top,
    level 3 and deeper add 1.2 on top of that.
    """
    size = base * 1.6
    if level >= 2:
        size *= 1.4
    if level >= 3:
        size *= 1.2
    return size


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    title: str

    @property
    def text(self) -> str:
        return self.title

    @property
    def font_size(self) -> float:
        return heading_font_size(self.level)


@dataclass(frozen=True, slots=True)
class Quote:
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return " ".join(self.lines)


@dataclass(frozen=True, slots=True)
class ListItem:
    item: str

    @property
    def text(self) -> str:
        return self.item


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    @property
    def text(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class BlankLine:
    @property
    def text(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Paragraph:
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return " ".join(self.lines)


Block: TypeAlias = Heading | Quote | ListItem | HorizontalRule | BlankLine | Paragraph


def _heading(line: str) -> Heading:
    title = line.lstrip("#")
    return Heading(level=len(line) - len(title), title=title.strip())


def _quote_line(stripped: str) -> str:
    content = stripped[1:]
    if content.startswith(" "):
        content = content[1:]
    return content


def sectionize(text: str) -> list[Block]:
    """Split ``text`` into lines and group them into blocks, top to bottom.

    Quote and paragraph lines continue the previous block of the same kind;
    runs of blank lines collapse into one and blank lines before the first
    block are dropped.
    """
    blocks: list[Block] = []
    for line in text.split("\n"):
        stripped = line.strip()
        prev = blocks[-1] if blocks else None

        if line.startswith("#"):
            blocks.append(_heading(stripped))
        elif stripped.startswith(">"):
            quote_line = _quote_line(stripped)
            if isinstance(prev, Quote):
                blocks[-1] = Quote((*prev.lines, quote_line))
            else:
                blocks.append(Quote((quote_line,)))
        elif LIST_ITEM.match(stripped):
            blocks.append(ListItem(stripped[1:].strip()))
        elif HORIZONTAL_RULE.match(stripped):
            blocks.append(HorizontalRule())
        elif not stripped:
            if prev is not None and not isinstance(prev, BlankLine):
                blocks.append(BlankLine())
        elif isinstance(prev, Paragraph):
            blocks[-1] = Paragraph((*prev.lines, line))
        else:
            blocks.append(Paragraph((line,)))
    return blocks
