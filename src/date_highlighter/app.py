"""Application entry point for date-highlighter."""

from __future__ import annotations

import argparse
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from art import tprint
from rich.console import Console
from rich.table import Table

from date_highlighter import settings
from date_highlighter.adapters.json_settings_store import JsonSettingsStore
from date_highlighter.adapters.local_vault import LocalVault
from date_highlighter.adapters.rich_marks import highlight_text
from date_highlighter.adapters.stylesheet import CssStyleSheet
from date_highlighter.core.highlighter import highlight_visible, to_inline_marks
from date_highlighter.core.models import VisibleRange
from date_highlighter.core.processor import FilenameStyles

NAME = "DATES"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(console: bool) -> None:
    level_name = str(settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if console and settings.LOG_CONSOLE:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if settings.LOG_FILE:
        path = settings.LOG_FILE
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        # Keep library warnings from reaching stderr while the TUI owns it.
        logging.getLogger().addHandler(logging.NullHandler())
        return

    logging.basicConfig(level=level, handlers=handlers)


def _store(config_path: Optional[str]) -> JsonSettingsStore:
    return JsonSettingsStore(config_path or settings.CONFIG_PATH)


def _view(args: argparse.Namespace) -> None:
    from date_highlighter.frontend.app import HighlighterApp

    vault = LocalVault(args.vault)
    styles = CssStyleSheet(args.css_output)
    HighlighterApp(vault, _store(args.config), styles).run()


def _scan(args: argparse.Namespace) -> None:
    """Print a file with its dates highlighted, plus a table of the dates."""

    config = _store(args.config).load()
    text = Path(args.file).read_text(encoding="utf-8", errors="replace")
    now = datetime.now()
    # The whole file is one visible range when printed to the console.
    results = highlight_visible([VisibleRange(start=0, end=len(text), text=text)], config, now)
    marks = sorted(to_inline_marks(results), key=lambda mark: (mark.start, mark.end))

    console = Console()
    console.print(highlight_text(text, marks), soft_wrap=True)

    if not results:
        logging.getLogger(__name__).info("No dates found in %s", args.file)
        return

    table = Table("date", "offset", "age")
    for result in sorted(results, key=lambda item: item.start):
        table.add_row(result.text, str(result.start), result.label or "invalid date")
    console.print(table)


def _css(args: argparse.Namespace) -> None:
    """Build the filename style sheet for a vault once."""

    store = _store(args.config)
    config = store.load()
    styles = CssStyleSheet(args.output)
    count = FilenameStyles(LocalVault(args.vault), styles, lambda: config).rebuild()
    logging.getLogger(__name__).info("%s files highlighted", count)
    if not args.output:
        print(styles.text, end="")


def main(argv: Optional[list[str]] = None) -> None:
    config_help = "Settings JSON file (default: DATE_HIGHLIGHTER_CONFIG)"
    parser = argparse.ArgumentParser(prog="date-highlighter")
    parser.add_argument("--config", help=config_help)
    # --config works before or after the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help=config_help)
    subparsers = parser.add_subparsers(dest="command")

    view_parser = subparsers.add_parser("view", parents=[common], help="Browse a vault in the terminal UI")
    view_parser.add_argument("vault", nargs="?", default=".", help="Vault directory")
    view_parser.add_argument("--css-output", help="Also write the filename style sheet here")

    scan_parser = subparsers.add_parser("scan", parents=[common], help="Print a file with its dates highlighted")
    scan_parser.add_argument("file")

    css_parser = subparsers.add_parser("css", parents=[common], help="Print or export the filename style sheet")
    css_parser.add_argument("vault", nargs="?", default=".", help="Vault directory")
    css_parser.add_argument("-o", "--output", help="Write the sheet to this file instead of stdout")

    args = parser.parse_args(argv)
    if args.command == "scan":
        _configure_logging(console=True)
        _scan(args)
        return
    if args.command == "css":
        _configure_logging(console=True)
        _css(args)
        return
    if args.command is None:
        args.vault = "."
        args.css_output = None
    _print_banner()
    _configure_logging(console=False)
    _view(args)


if __name__ == "__main__":
    main()
