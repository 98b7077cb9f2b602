"""
Scrollback log producers.

The scrollback log is owned by whoever produces output. This module holds
the append-only container, a logging handler that feeds it, and a loader
for JSONL log files.
"""

import json
import logging
from collections import deque
from pathlib import Path
from typing import Deque, Iterable, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from .errors import ScrollbackError
from .models import LineType, LogLine

logger = logging.getLogger(__name__)


class ScrollbackLog:
    """
    Append-only, chronologically ordered log of output lines.

    Uses a deque so that an optional ``max_size`` evicts the oldest lines
    first. Unbounded by default.
    """

    def __init__(self, lines: Iterable[LogLine] = (), max_size: Optional[int] = None):
        """
        Initialize the log.

        Args:
            lines: Initial lines, oldest first
            max_size: Maximum number of lines to retain (None = unbounded)
        """
        self._lines: Deque[LogLine] = deque(lines, maxlen=max_size)
        self._max_size = max_size

    def append(self, line: LogLine) -> None:
        """Add a line to the end of the log."""
        self._lines.append(line)

    def extend(self, lines: Iterable[LogLine]) -> None:
        """Add several lines, preserving their order."""
        self._lines.extend(lines)

    def echo_input(self, text: str) -> LogLine:
        """Record user input as a dimmed "> text" line."""
        line = LogLine.dim(f"> {text}")
        self.append(line)
        return line

    def record_error(self, error: BaseException) -> LogLine:
        """Record a failure as an error line, e.g. "RuntimeError: boom"."""
        line = LogLine.error(f"{type(error).__name__}: {error}")
        self.append(line)
        return line

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> Tuple[LogLine, ...]:
        """Immutable snapshot of the log, oldest first."""
        return tuple(self._lines)

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LogLine]:
        return iter(self.lines)


class ScrollbackLogHandler(logging.Handler):
    """Logging handler that turns log records into scrollback lines.

    Level mapping:
        ERROR and above -> error
        WARNING         -> info
        INFO            -> plain
        below INFO      -> dim

    Pass ``extra={"line_type": "success"}`` to choose the line type explicitly.
    """

    def __init__(self, log: ScrollbackLog, level: int = logging.NOTSET):
        super().__init__(level)
        self.log = log
        self.setFormatter(logging.Formatter("%(message)s"))

    @staticmethod
    def line_type_for(record: logging.LogRecord):
        explicit = getattr(record, "line_type", None)
        if explicit is not None:
            return explicit
        if record.levelno >= logging.ERROR:
            return LineType.ERROR
        if record.levelno >= logging.WARNING:
            return LineType.INFO
        if record.levelno >= logging.INFO:
            return LineType.PLAIN
        return LineType.DIM

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = LogLine(
                text=self.format(record),
                type=self.line_type_for(record),
                timestamp=record.created,
            )
            self.log.append(line)
        except Exception:
            self.handleError(record)


def load_lines(
    path: Path,
    skip_partial: bool = False,
    malformed_level: int = logging.WARNING,
) -> List[LogLine]:
    """Load log lines from a JSONL file.

    Each non-blank line must be a JSON object with ``text`` and optionally
    ``type`` and ``timestamp``. Malformed lines are logged and skipped.

    Args:
        path: JSONL file to read
        skip_partial: Ignore a last line without a trailing newline, which a
            producer may still be writing
        malformed_level: Log level for skipped malformed lines

    Returns:
        List of LogLine objects in file order

    Raises:
        ScrollbackError: If the file cannot be read
    """
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ScrollbackError(f"Cannot read log file {path}: {e}") from e

    raw_lines = content.splitlines()
    if skip_partial and raw_lines and not content.endswith("\n"):
        raw_lines.pop()

    lines = []
    for lineno, raw in enumerate(raw_lines, start=1):
        if not raw.strip():
            continue
        try:
            data = json.loads(raw)
            lines.append(LogLine.model_validate(data))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.log(malformed_level, f"Skipping malformed line {lineno} in {path}: {e}")
            continue

    logger.debug(f"Loaded {len(lines)} line(s) from {path}")
    return lines
