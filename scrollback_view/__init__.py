"""Scrollback View

Terminal rendering of the tail of an output log. Each line carries a
semantic type (success, error, info, dim, plain) that picks its color and
leading glyph; only the most recent lines are shown.
"""

from .models import LineType, LogLine, Row
from .presentation import DEFAULT_MAX_LINES, PLACEHOLDER_TEXT, render_rows, select_window

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_LINES",
    "LineType",
    "LogLine",
    "PLACEHOLDER_TEXT",
    "Row",
    "render_rows",
    "select_window",
]
