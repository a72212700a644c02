"""Custom inline rules: replace pattern matches with pre-built values.

Text is carried as a list of segments. Each rule only scans the
:class:`RawText` segments that earlier rules left behind, so a later rule
can never match inside (or across) a region that was already replaced.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

logger = logging.getLogger(__name__)

Builder: TypeAlias = "Callable[[re.Match[str], float], Any]"


@dataclass(frozen=True, slots=True)
class InlineRule:
    """A pattern plus the builder that turns a match into a rendered value.

    A ``str`` pattern is matched literally. The builder receives the match
    (group 0 is the whole match) and the caller's font scale.
    """

    pattern: re.Pattern[str] | str
    builder: Builder
    name: str = ""
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = self.pattern
        if isinstance(regex, str):
            regex = re.compile(re.escape(regex))
        object.__setattr__(self, "regex", regex)


@dataclass(frozen=True, slots=True)
class Link:
    """Default rendered value for link rules."""

    label: str
    url: str
    font_scale: float = 1.0


@dataclass(frozen=True, slots=True)
class RawText:
    text: str


@dataclass(frozen=True, slots=True)
class Replaced:
    value: Any


Segment: TypeAlias = RawText | Replaced


def _build_link(match: re.Match[str], font_scale: float) -> Link:
    return Link(label=match.group(1), url=match.group(2), font_scale=font_scale)


def _build_autolink(match: re.Match[str], font_scale: float) -> Link:
    return Link(label=match.group(1), url=match.group(1), font_scale=font_scale)


DEFAULT_RULES: tuple[InlineRule, ...] = (
    InlineRule(re.compile(r"\[(.*?)\]\((.*?)\)"), _build_link, name="link"),
    InlineRule(re.compile(r"<(.*?)>"), _build_autolink, name="autolink"),
)


def _apply(rule: InlineRule, text: str, font_scale: float) -> list[Segment]:
    segments: list[Segment] = []
    pos = 0
    for match in rule.regex.finditer(text):
        if match.start() > pos:
            segments.append(RawText(text[pos : match.start()]))
        segments.append(Replaced(rule.builder(match, font_scale)))
        pos = match.end()
    if pos < len(text):
        segments.append(RawText(text[pos:]))
    return segments


def split_inline(
    text: str,
    rules: Sequence[InlineRule],
    font_scale: float = 1.0,
) -> list[Segment]:
    """Apply ``rules`` in order and return text and replaced segments.

    Empty text segments between matches are dropped, so text without
    matches comes back as a single :class:`RawText`. Empty text is returned
    as one empty fragment.
    """
    if not text:
        return [RawText(text)]
    segments: list[Segment] = [RawText(text)]
    for rule in rules:
        result: list[Segment] = []
        replaced = 0
        for segment in segments:
            if isinstance(segment, RawText):
                parts = _apply(rule, segment.text, font_scale)
                replaced += sum(isinstance(p, Replaced) for p in parts)
                result.extend(parts)
            else:
                result.append(segment)
        if replaced:
            logger.debug("Rule %s replaced %d match(es)", rule.name or rule.pattern, replaced)
        segments = result
    return segments


def with_defaults(rules: Iterable[InlineRule] = ()) -> tuple[InlineRule, ...]:
    """Return the default link rules followed by ``rules``."""
    return (*DEFAULT_RULES, *rules)
