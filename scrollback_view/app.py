"""Interactive Textual app around the scrollback view.

A scrollback panel above a command input. Submitted input is echoed into
the log, handed to a command handler, and the handler's output (or its
error) is appended below it.
"""

import logging
from typing import Callable, Iterable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from .log import ScrollbackLog
from .models import LogLine
from .presentation import DEFAULT_MAX_LINES
from .widgets import ScrollbackView

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str], Iterable[LogLine]]

EXIT_COMMANDS = ("/exit", "exit", "quit")


def echo_handler(command: str) -> Iterable[LogLine]:
    """Default command handler: repeat the command back as an info line."""
    return [LogLine.info(command)]


class ScrollbackApp(App):
    """Scrollback log with a command input.

    The app and its ScrollbackView share one ScrollbackLog, so lines added
    through either show up in both.
    """

    CSS = """
    Screen {
        background: $surface;
    }

    #command-input {
        dock: bottom;
        margin: 0 1 1 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    TITLE = "scrollback-view"

    def __init__(
        self,
        lines: Iterable[LogLine] = (),
        command_handler: Optional[CommandHandler] = None,
        max_lines: int = DEFAULT_MAX_LINES,
        inset: int = 1,
    ):
        """Initialize the app.

        Args:
            lines: Lines to show on startup
            command_handler: Called with each submitted command; returns lines
                to append (default: echo_handler)
            max_lines: Window size
            inset: Horizontal padding in cells
        """
        super().__init__()
        self.scrollback = ScrollbackLog(lines)
        self.command_handler = command_handler or echo_handler
        self.window_size = max_lines
        self.row_inset = inset

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScrollbackView(scrollback=self.scrollback, max_lines=self.window_size, inset=self.row_inset)
        yield Input(placeholder="Enter a task or /command", id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#command-input", Input).focus()

    def _sync_view(self) -> None:
        self.query_one(ScrollbackView).refresh_lines()

    def run_command(self, command: str) -> None:
        """Echo a command, run it and append its output to the log."""
        self.scrollback.echo_input(command)
        try:
            self.scrollback.extend(self.command_handler(command))
        except Exception as e:
            logger.error(f"Command failed: {command!r}: {e}")
            self.scrollback.record_error(e)
        self._sync_view()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle a submitted command line."""
        value = event.value
        event.input.value = ""

        if not value.strip():
            return

        if value.strip() in EXIT_COMMANDS:
            self.exit()
            return

        self.run_command(value)
