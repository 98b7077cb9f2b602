"""
Scrollback Display Module

Rich-formatted rendering of scrollback rows with live update support.
"""

import json
import time
from typing import Callable, List, Optional, Sequence

from rich.console import Console, Group
from rich.live import Live
from rich.padding import Padding
from rich.text import Text

from .models import LogLine, Row
from .presentation import DEFAULT_MAX_LINES, render_rows


def row_to_text(row: Row) -> Text:
    """
    Convert a row descriptor to a single-line Rich Text.

    Args:
        row: Row descriptor

    Returns:
        Rich Text with the glyph and content styled separately
    """
    text = Text(no_wrap=True, overflow="crop")

    if row.glyph:
        text.append(row.glyph, style=row.color or "")

    parts = []
    if row.color:
        parts.append(row.color)
    if row.dim:
        parts.append("dim")
    text.append(row.text, style=" ".join(parts))

    return text


def rows_to_renderable(rows: Sequence[Row], inset: int = 1) -> Padding:
    """Stack rows vertically inside a horizontal inset."""
    return Padding(Group(*[row_to_text(row) for row in rows]), (0, inset))


def create_scrollback_renderable(
    log: Sequence[LogLine],
    max_lines: int = DEFAULT_MAX_LINES,
    inset: int = 1,
) -> Padding:
    """
    Create Rich renderable for the visible part of a log.

    Args:
        log: Log lines, oldest first
        max_lines: Window size
        inset: Horizontal padding in cells

    Returns:
        Rich renderable ready for Console.print or Live.update
    """
    return rows_to_renderable(render_rows(log, max_lines), inset)


def format_rows_json(rows: List[Row]) -> str:
    """
    Format row descriptors as JSON string.

    Args:
        rows: Row descriptors

    Returns:
        JSON string
    """
    return json.dumps([row.to_dict() for row in rows], indent=2, ensure_ascii=False)


def display_scrollback(
    log: Sequence[LogLine],
    console: Optional[Console] = None,
    max_lines: int = DEFAULT_MAX_LINES,
    inset: int = 1,
) -> None:
    """
    Print the visible part of a log once.

    Args:
        log: Log lines, oldest first
        console: Rich console (optional, creates new if not provided)
        max_lines: Window size
        inset: Horizontal padding in cells
    """
    if console is None:
        console = Console()

    console.print(create_scrollback_renderable(log, max_lines, inset))


def display_scrollback_live(
    lines_getter: Callable[[], Sequence[LogLine]],
    console: Optional[Console] = None,
    max_lines: int = DEFAULT_MAX_LINES,
    inset: int = 1,
    refresh_per_second: float = 4.0,
) -> None:
    """
    Display the scrollback with live updates until interrupted.

    The projection is re-run from ``lines_getter()`` on every refresh.

    Args:
        lines_getter: Callable that returns the current log
        console: Rich console (optional, creates new if not provided)
        max_lines: Window size
        inset: Horizontal padding in cells
        refresh_per_second: Refresh rate
    """
    if console is None:
        console = Console()

    with Live(
        create_scrollback_renderable(lines_getter(), max_lines, inset),
        console=console,
        refresh_per_second=refresh_per_second,
        auto_refresh=False,
    ) as live:
        try:
            while True:
                live.update(
                    create_scrollback_renderable(lines_getter(), max_lines, inset),
                    refresh=True,
                )
                time.sleep(1.0 / refresh_per_second)
        except KeyboardInterrupt:
            pass
