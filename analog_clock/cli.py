"""Command line for the terminal analog clock"""

import argparse
import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .app import AnalogClock
from .aspect import DEFAULT_RATIO
from .config import ClockOptions
from .errors import ConfigurationError, TerminalError, UnknownThemeError
from .terminal import Terminal
from .themes import DEFAULT_THEME, THEMES

KEY_BINDINGS = """
Key bindings:
  'q'     : quit
  '-'     : decrease clock width
  '='/'+' : increase clock width
  '0'     : reset clock width
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="analog-clock",
        description="Analog clock for the terminal",
        epilog=KEY_BINDINGS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--theme", default=DEFAULT_THEME, help=f"Theme of the clock (default: {DEFAULT_THEME})")
    parser.add_argument("--tick", type=int, default=1000, help="How often the clock is redrawn, in milliseconds (default: 1000)")
    parser.add_argument("--hide-second-hand", action="store_true", help="Hide the second hand")
    parser.add_argument("--hide-hour-labels", action="store_true", help="Hide the hour marks")
    parser.add_argument("--show-minute-labels", action="store_true", help="Show the minute marks")
    parser.add_argument("--aspect-ratio", type=float, default=DEFAULT_RATIO,
                        help=f"Height/width ratio of a terminal cell (default: {DEFAULT_RATIO})")
    parser.add_argument("--list-themes", action="store_true", help="List the available themes and exit")
    parser.add_argument("--log-file", help="Write a log to this file")
    parser.add_argument("--log-level", default="info", help="Log level when --log-file is set (default: info)")
    return parser


def configure_logging(log_file, log_level):
    """Log to a file only; the terminal belongs to the clock"""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def print_themes(console):
    table = Table(title="Themes")
    table.add_column("Name", style="cyan")
    for column in ("Hour", "Minute", "Second", "Clock face"):
        table.add_column(column)

    for theme in THEMES:
        swatches = [
            f"[{color}]██[/] {color}"
            for color in (theme.hour, theme.minute, theme.second, theme.clock_face)
        ]
        table.add_row(theme.name, *swatches)

    console.print(table)


def main(argv=None):
    """Entry point for the clock application"""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    console = Console()
    err_console = Console(stderr=True)

    if args.list_themes:
        print_themes(console)
        return 0

    try:
        options = ClockOptions.from_args(args)
    except UnknownThemeError as e:
        err_console.print(f"\n  [red]{escape(str(e))}[/red]\n")
        err_console.print(f"  Available themes: {escape(', '.join(e.available))}")
        err_console.print("  Run with --list-themes to preview them.\n")
        return 1
    except ConfigurationError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    try:
        AnalogClock(options, Terminal()).run()
    except TerminalError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except KeyboardInterrupt:
        return 0

    return 0
