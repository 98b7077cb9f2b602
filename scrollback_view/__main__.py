"""
Scrollback View CLI

Main entry point for rendering scrollback logs in the terminal.

Usage:
    scrollback-view show FILE [--max-lines N] [--json]
    scrollback-view follow FILE [--max-lines N]
    scrollback-view tui [FILE] [--max-lines N]

FILE is a JSONL log, one {"type": ..., "text": ...} object per line.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import click
from rich.console import Console

from .config import ScrollbackSettings, load_settings
from .display import display_scrollback, display_scrollback_live, format_rows_json
from .errors import ScrollbackError
from .log import load_lines
from .models import LogLine
from .presentation import render_rows

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
    )


def _fail(console: Console, error: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")
    sys.exit(1)


def _window(settings: ScrollbackSettings, max_lines: Optional[int]) -> int:
    return settings.max_lines if max_lines is None else max_lines


def follow_lines_getter(log_file: Path) -> Callable[[], List[LogLine]]:
    """Build the per-refresh reader used by `follow`.

    Lines still being written are skipped and malformed lines are only
    logged at debug level, so warnings do not pile up under the live view.
    A missing or unreadable file shows as an empty log for that refresh.
    """
    def lines_getter() -> List[LogLine]:
        try:
            return load_lines(log_file, skip_partial=True, malformed_level=logging.DEBUG)
        except ScrollbackError as e:
            logger.debug(f"Log file not readable yet: {e}")
            return []

    return lines_getter


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose logging')
@click.option('--config', 'config_file', type=click.Path(path_type=Path), default=None,
              help='JSON config file (default: $XDG_CONFIG_HOME/scrollback-view/config.json)')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Optional[Path]):
    """Render the tail of a scrollback log in the terminal."""
    setup_logging(verbose)
    console = Console(stderr=True)

    try:
        settings = load_settings(config_file)
    except ScrollbackError as e:
        _fail(console, e)

    ctx.obj = settings


@cli.command()
@click.argument('log_file', type=click.Path(path_type=Path))
@click.option('-n', '--max-lines', type=int, default=None, help='Number of trailing lines to show')
@click.option('--json', 'output_json', is_flag=True, help='Output row descriptors as JSON')
@click.pass_obj
def show(settings: ScrollbackSettings, log_file: Path, max_lines: Optional[int], output_json: bool):
    """Render a log file once."""
    console = Console()

    try:
        lines = load_lines(log_file)
    except ScrollbackError as e:
        _fail(Console(stderr=True), e)

    window = _window(settings, max_lines)
    if output_json:
        click.echo(format_rows_json(render_rows(lines, window)))
    else:
        display_scrollback(lines, console, max_lines=window, inset=settings.inset)


@cli.command()
@click.argument('log_file', type=click.Path(path_type=Path))
@click.option('-n', '--max-lines', type=int, default=None, help='Number of trailing lines to show')
@click.pass_obj
def follow(settings: ScrollbackSettings, log_file: Path, max_lines: Optional[int]):
    """Show a log file live, re-reading it on every refresh. Ctrl+C to stop."""
    console = Console()

    display_scrollback_live(
        follow_lines_getter(log_file),
        console,
        max_lines=_window(settings, max_lines),
        inset=settings.inset,
        refresh_per_second=settings.refresh_per_second,
    )


@cli.command()
@click.argument('log_file', type=click.Path(path_type=Path), required=False)
@click.option('-n', '--max-lines', type=int, default=None, help='Number of trailing lines to show')
@click.pass_obj
def tui(settings: ScrollbackSettings, log_file: Optional[Path], max_lines: Optional[int]):
    """Open the interactive scrollback app."""
    from .app import ScrollbackApp

    lines = []
    if log_file is not None:
        try:
            lines = load_lines(log_file)
        except ScrollbackError as e:
            _fail(Console(stderr=True), e)

    app = ScrollbackApp(lines, max_lines=_window(settings, max_lines), inset=settings.inset)
    app.run()


if __name__ == '__main__':
    cli()
