"""Command-line front door for lazycd.

Parses CLI options, merges them with the config file, lists the start
directory, and runs the interactive picker. Returns the process exit status.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .app import PickerApp
from .errors import ListingError, OutputWriteError
from .navigation import NavigationState
from .render import DisplayConfig
from .terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme

LOG_ENV_VAR = "LAZYCD_LOG"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pick a directory with vim-style keys and write its path for the shell to cd into."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files.")
    parser.add_argument("-i", "--icons", action="store_true", help="Show icons (needs a Nerd Font).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--output", metavar="FILE", default=None, help="File that receives the selected path.")
    return parser


def configure_logging() -> None:
    """Log to the file named by ``LAZYCD_LOG``; stay silent otherwise."""
    log_path = os.environ.get(LOG_ENV_VAR)
    if not log_path:
        return
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse arguments, run the picker, and return the exit status.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    if default_path is None:
        default_path = Path.cwd()
    start = Path(args.path).expanduser() if args.path is not None else default_path

    show_hidden = args.all or config.load_show_hidden()
    show_icons = args.icons or config.load_show_icons()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    output_path = Path(args.output).expanduser() if args.output else config.load_output_path()

    try:
        navigation = NavigationState.open(start, show_hidden=show_hidden)
    except ListingError as exc:
        print(f"lazycd: {exc.message}", file=sys.stderr)
        return 1

    app = PickerApp(
        navigation,
        display=DisplayConfig(show_icons=show_icons, theme=theme),
        search_wrap=config.load_search_wrap(),
        output_path=output_path,
    )
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    try:
        app.run(terminal)
    except OutputWriteError as exc:
        print(f"lazycd: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
