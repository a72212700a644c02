"""Textual App — document viewer entry point."""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header

from simple_markdown.tui.help_screen import HelpScreen
from simple_markdown.tui.markdown_pane import MarkdownPane

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from textual.binding import BindingType

    from simple_markdown.inline import InlineRule

logger = logging.getLogger(__name__)


class ViewerApp(App[None]):
    """Simplified Markdown viewer."""

    TITLE = "simple-markdown"

    CSS = """
    #document {
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
        Binding("question_mark", "show_help", "Help", show=True),
        Binding("r", "reload", "Reload", show=True),
        Binding("j", "scroll_document(1)", "Down", show=False),
        Binding("k", "scroll_document(-1)", "Up", show=False),
    ]

    def __init__(
        self,
        path: Path,
        rules: Sequence[InlineRule] = (),
        font_scale: float = 1.0,
    ) -> None:
        super().__init__()
        self._path = path
        self._rules = tuple(rules)
        self._font_scale = font_scale
        self.sub_title = str(path)

    def _read_source(self) -> str:
        try:
            return self._path.read_text()
        except OSError as e:
            logger.warning("Cannot read %s", self._path, exc_info=True)
            return f"Cannot read {self._path}: {e.strerror or e}"

    def compose(self) -> ComposeResult:
        """Create the scrollable document layout."""
        yield Header()
        with VerticalScroll(id="document"):
            yield MarkdownPane(
                self._read_source(),
                rules=self._rules,
                font_scale=self._font_scale,
                id="markdown-pane",
            )
        yield Footer()

    def action_reload(self) -> None:
        """Re-read the file and render it again."""
        self.query_one(MarkdownPane).show_markdown(self._read_source())
        self.notify(f"Reloaded {self._path.name}")

    def action_scroll_document(self, direction: int) -> None:
        """Scroll the document by one line."""
        self.query_one("#document", VerticalScroll).scroll_relative(y=direction)

    def action_show_help(self) -> None:
        """Show the help overlay."""
        self.push_screen(HelpScreen())

    def action_open_link(self, url: str) -> None:
        """Open a link in the web browser."""
        logger.debug("Opening %s", url)
        webbrowser.open(url)
