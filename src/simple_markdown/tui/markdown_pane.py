"""Markdown pane widget — shows a parsed document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

from simple_markdown.parser import parse
from simple_markdown.tui.widgets.markdown_light import render_nodes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from simple_markdown.inline import InlineRule
    from simple_markdown.parser import Node


class MarkdownPane(Static):
    """Static widget that parses and renders simplified Markdown."""

    def __init__(
        self,
        source: str = "",
        *,
        rules: Sequence[InlineRule] = (),
        font_scale: float = 1.0,
        id: str | None = None,  # noqa: A002
    ) -> None:
        self._rules = tuple(rules)
        self._font_scale = font_scale
        self.source = source
        self.nodes: list[Node] = parse(source, self._rules, font_scale=font_scale)
        super().__init__(render_nodes(self.nodes), id=id)

    def show_markdown(self, source: str) -> None:
        """Re-parse and display ``source``."""
        self.source = source
        self.nodes = parse(source, self._rules, font_scale=self._font_scale)
        self.update(render_nodes(self.nodes))
