"""Help screen — modal overlay showing keybindings and supported syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.containers import Center, Middle
from textual.screen import ModalScreen
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

_HELP = """\
[bold]Keybindings[/bold]

  [bold]j / ↓[/bold]     Scroll down
  [bold]k / ↑[/bold]     Scroll up
  [bold]r[/bold]         Reload file
  [bold]?[/bold]         This help
  [bold]q[/bold]         Quit

[bold]Syntax[/bold]

  # / ## / ###      Headings
  > text            Quote
  - item, * item    List item
  ---               Horizontal rule
  *italic*, **bold**  Emphasis
  \\[label](url), <url>  Links (click to open)

Press [bold]?[/bold] or [bold]Escape[/bold] to dismiss.
"""


class HelpScreen(ModalScreen[None]):
    """Modal help overlay."""

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("question_mark", "dismiss_help", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    HelpScreen > Center > Middle > Static {
        width: 50;
        padding: 2 4;
        background: $surface;
        border: tall $primary;
    }
    """

    def compose(self) -> ComposeResult:
        """Create the help content."""
        with Center(), Middle():
            yield Static(_HELP, markup=True, id="help-text")

    def action_dismiss_help(self) -> None:
        """Dismiss the help screen."""
        self.dismiss(None)
