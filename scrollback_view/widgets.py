"""ScrollbackView widget for Textual applications.

Shows the trailing window of a scrollback log. The widget re-runs the
row projection whenever its lines or window size change.
"""

from typing import Iterable, List, Optional, Tuple

from textual.reactive import reactive
from textual.widgets import Static

from .display import rows_to_renderable
from .log import ScrollbackLog
from .models import LogLine, Row
from .presentation import DEFAULT_MAX_LINES, render_rows


class ScrollbackView(Static):
    """Scrollback panel showing the most recent output lines.

    The widget draws from a ScrollbackLog, which it may share with the
    producer. Appends through the widget go to that log, and producers that
    append to the log directly call ``refresh_lines`` afterwards.

    Attributes:
        scrollback: Backing log
        lines: Snapshot of the backing log, oldest first (reactive)
        max_lines: Window size (reactive)
        row_inset: Horizontal padding in cells

    Examples:
        >>> view = ScrollbackView(max_lines=10)
        >>> view.append_line(LogLine.success("build ok"))
    """

    DEFAULT_CSS = """
    ScrollbackView {
        height: 1fr;
        overflow: hidden;
    }
    """

    lines: reactive[Tuple[LogLine, ...]] = reactive(tuple)
    max_lines: reactive[int] = reactive(DEFAULT_MAX_LINES)

    def __init__(
        self,
        lines: Iterable[LogLine] = (),
        *,
        scrollback: Optional[ScrollbackLog] = None,
        max_lines: int = DEFAULT_MAX_LINES,
        inset: int = 1,
        name: str = "scrollback",
        id: str = "scrollback",
        classes: str = "",
    ):
        """Initialize the scrollback view.

        Args:
            lines: Initial log lines, appended to ``scrollback`` if given
            scrollback: Log to draw from (default: a new ScrollbackLog)
            max_lines: Window size
            inset: Horizontal padding in cells
            name: Widget name
            id: Widget ID
            classes: CSS classes
        """
        if scrollback is None:
            scrollback = ScrollbackLog()
        scrollback.extend(lines)
        initial = scrollback.lines
        super().__init__(
            rows_to_renderable(render_rows(initial, max_lines), inset),
            name=name,
            id=id,
            classes=classes,
        )
        self.scrollback = scrollback
        self.row_inset = inset
        self.set_reactive(ScrollbackView.lines, initial)
        self.set_reactive(ScrollbackView.max_lines, max_lines)

    @property
    def rows(self) -> List[Row]:
        """Rows currently visible."""
        return render_rows(self.lines, self.max_lines)

    def append_line(self, line: LogLine) -> None:
        self.scrollback.append(line)
        self.refresh_lines()

    def extend_lines(self, lines: Iterable[LogLine]) -> None:
        self.scrollback.extend(lines)
        self.refresh_lines()

    def refresh_lines(self) -> None:
        """Pick up lines appended to the backing log."""
        self.lines = self.scrollback.lines

    def _refresh_rows(self) -> None:
        self.update(rows_to_renderable(self.rows, self.row_inset))

    def watch_lines(self, old_lines: Tuple[LogLine, ...], new_lines: Tuple[LogLine, ...]) -> None:
        self._refresh_rows()

    def watch_max_lines(self, old_value: int, new_value: int) -> None:
        self._refresh_rows()
