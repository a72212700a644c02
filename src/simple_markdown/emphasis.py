"""Inline emphasis: split text on ``*`` runs, then resolve runs into styles.

Tokenizing and resolving are separate steps so that the boundary rules
(whitespace on either side of a run) can look at both neighbours of a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

MARKER = "*"
ESCAPE = "\\"


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text between marker runs."""

    text: str


@dataclass(frozen=True, slots=True)
class Run:
    """A run of consecutive markers."""

    count: int


Token: TypeAlias = Literal | Run


@dataclass(frozen=True, slots=True)
class Style:
    """Active emphasis flags."""

    italic: bool = False
    bold: bool = False

    def opened(self, count: int) -> Style:
        """Turn flags on for a run of ``count`` markers."""
        if count == 1:
            return Style(italic=True, bold=self.bold)
        if count == 2:
            return Style(italic=self.italic, bold=True)
        return Style(italic=True, bold=True)

    def closed(self, count: int) -> Style:
        """Turn flags off for a run of ``count`` markers."""
        if count == 1:
            return Style(italic=False, bold=self.bold)
        if count == 2:
            return Style(italic=self.italic, bold=False)
        return Style()


PLAIN = Style()


@dataclass(frozen=True, slots=True)
class StyledRun:
    """Text emitted under the style active at that point."""

    text: str
    style: Style = PLAIN


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into literal fragments and marker runs.

    A backslash makes the next character literal. A fragment that starts
    with a marker gets an empty leading literal.
    """
    tokens: list[Token] = []
    buf: list[str] = []
    count = 0
    i = 0
    while i < len(text):
        c = text[i]
        if c == MARKER:
            if buf or (not tokens and not count):
                tokens.append(Literal("".join(buf)))
                buf = []
            count += 1
        else:
            if count:
                tokens.append(Run(count))
                count = 0
            if c == ESCAPE and i + 1 < len(text):
                i += 1
                c = text[i]
            buf.append(c)
        i += 1

    if count:
        tokens.append(Run(count))
    elif buf or not tokens:
        tokens.append(Literal("".join(buf)))
    return tokens


def _is_space_before(tokens: list[Token], index: int) -> bool:
    if index == 0:
        return True
    prev = tokens[index - 1]
    if not isinstance(prev, Literal) or not prev.text:
        return True
    return prev.text[-1].isspace()


def _is_space_after(tokens: list[Token], index: int) -> bool:
    if index + 1 >= len(tokens):
        return True
    nxt = tokens[index + 1]
    if not isinstance(nxt, Literal) or not nxt.text:
        return True
    return nxt.text[0].isspace()


def resolve(tokens: list[Token], style: Style = PLAIN) -> list[StyledRun]:
    """Fold ``tokens`` into styled runs, threading the active style through.

    Unmatched openers leave their flags set for the rest of the tokens;
    closers for flags that were never set are no-ops.
    """
    runs: list[StyledRun] = []
    for index, token in enumerate(tokens):
        if isinstance(token, Literal):
            if token.text:
                runs.append(StyledRun(token.text, style))
            continue

        before = _is_space_before(tokens, index)
        after = _is_space_after(tokens, index)
        if before and not after:
            style = style.opened(token.count)
        elif after and not before:
            style = style.closed(token.count)
        else:
            runs.append(StyledRun(MARKER * token.count, style))
    return runs


def emphasize(text: str) -> list[StyledRun]:
    """Tokenize and resolve ``text`` in one step."""
    return resolve(tokenize(text))
