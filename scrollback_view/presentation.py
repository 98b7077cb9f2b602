"""
Scrollback View

Turns a log and a window size into the rows a terminal renderer draws:
the trailing window of the log, each line mapped to its glyph and color.
The projection is pure; rendering backends live in ``display``.
"""

from typing import Dict, List, NamedTuple, Optional, Sequence, Union

from .models import LineType, LogLine, Row

DEFAULT_MAX_LINES = 20
PLACEHOLDER_TEXT = "Type / for commands, or enter a task"


class LineStyle(NamedTuple):
    """Presentation of one line type."""

    glyph: str
    color: Optional[str]
    dim: bool


FALLBACK_STYLE = LineStyle(glyph="", color=None, dim=False)

LINE_STYLES: Dict[LineType, LineStyle] = {
    LineType.SUCCESS: LineStyle(glyph="✓ ", color="green", dim=False),
    LineType.ERROR: LineStyle(glyph="✗ ", color="red", dim=False),
    LineType.INFO: LineStyle(glyph="→ ", color="cyan", dim=False),
    LineType.DIM: LineStyle(glyph="", color=None, dim=True),
    LineType.PLAIN: FALLBACK_STYLE,
}


def style_for(line_type: Union[LineType, str]) -> LineStyle:
    """Look up presentation for a line type, falling back for unknown values."""
    try:
        return LINE_STYLES[LineType(line_type)]
    except (ValueError, TypeError):
        return FALLBACK_STYLE


def select_window(log: Sequence[LogLine], max_lines: int) -> List[LogLine]:
    """
    Select the trailing window of the log.

    Args:
        log: Lines in chronological order (oldest first)
        max_lines: Window size; values <= 0 select nothing

    Returns:
        The last ``min(len(log), max_lines)`` lines, order preserved
    """
    if max_lines <= 0:
        # log[-0:] would be the whole log
        return []
    return list(log[-max_lines:])


def placeholder_row() -> Row:
    """Row shown in place of content when the log is empty."""
    return Row(glyph="", color=None, dim=True, text=PLACEHOLDER_TEXT)


def render_line(line: LogLine) -> Row:
    """Map a single log line to its row descriptor."""
    style = style_for(line.type)
    return Row(glyph=style.glyph, color=style.color, dim=style.dim, text=line.text)


def render_rows(log: Sequence[LogLine], max_lines: int = DEFAULT_MAX_LINES) -> List[Row]:
    """
    Project a log onto the rows visible in a window of ``max_lines``.

    An empty log yields a single dimmed placeholder row. A non-positive
    window yields no rows at all, not even the placeholder for an empty
    log, so the row count never exceeds ``max_lines``. This departs from
    "placeholder regardless of window size" on purpose: a window of zero
    shows nothing.

    Args:
        log: Lines in chronological order (not modified)
        max_lines: Maximum number of trailing lines to show (default 20)

    Returns:
        Row descriptors, oldest first
    """
    if max_lines <= 0:
        return []

    visible = select_window(log, max_lines)
    if not visible:
        return [placeholder_row()]

    return [render_line(line) for line in visible]
