"""CLI interface for eradicate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from . import __version__, config
from .errors import ConfigError
from .state import AppState
from .tui import EradicateApp, Theme

_console = Console(highlight=False, stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="eradicate",
        description="Find files with a glob pattern, review them, and delete the marked ones.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "keys (browsing): i edit pattern, j/k move, enter toggle mark,\n"
            "                 g toggle case sensitivity, d delete marked, q quit\n"
            "keys (editing):  enter search, esc back, backspace erase"
        ),
    )
    parser.add_argument("--version", action="version", version=f"eradicate {__version__}")
    parser.add_argument("pattern", nargs="?", help="Glob pattern to search for on startup")

    case = parser.add_mutually_exclusive_group()
    case.add_argument(
        "--ignore-case",
        dest="case_sensitive",
        action="store_false",
        default=None,
        help="Start with case insensitive matching",
    )
    case.add_argument(
        "--case-sensitive",
        dest="case_sensitive",
        action="store_true",
        default=None,
        help="Start with case sensitive matching",
    )

    parser.add_argument("--config", type=Path, help="Config file (default: ~/.config/eradicate/config.yaml)")
    parser.add_argument("--debug", action="store_true", default=None, help="Log debug output to the log file")
    parser.add_argument("--log-file", type=Path, help="Where to write the log")
    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the effective config to the config file and exit",
    )
    return parser


def apply_overrides(cfg: dict, args: argparse.Namespace) -> dict:
    """Return cfg with command line options taking precedence."""
    cfg = dict(cfg)
    if args.case_sensitive is not None:
        cfg["case_sensitive"] = args.case_sensitive
    if args.debug is not None:
        cfg["debug"] = args.debug
    if args.log_file is not None:
        cfg["log_file"] = str(args.log_file)
    return cfg


def configure_logging(debug: bool, log_file: str | None) -> Path:
    """Send log records to a file; the terminal belongs to the TUI."""
    path = Path(log_file).expanduser() if log_file else config.get_default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=path,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return path


def _start_logging(debug: bool, log_file: str | None) -> None:
    try:
        configure_logging(debug, log_file)
    except OSError as e:
        _console.print(f"[red]Error:[/red] cannot open log file: {e}")
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Started from the command line alone so config warnings reach the log file.
    _start_logging(bool(args.debug), str(args.log_file) if args.log_file else None)

    try:
        cfg = apply_overrides(config.load_config(args.config), args)
    except ConfigError as e:
        _console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if args.write_config:
        target = args.config or config.get_config_path()
        config.save_config(cfg, target)
        _console.print(f"Wrote {target}")
        return

    _start_logging(cfg["debug"], cfg["log_file"])

    state = AppState(case_sensitive=cfg["case_sensitive"])
    app = EradicateApp(
        state,
        theme=Theme.from_config(cfg["theme"]),
        refresh_per_second=cfg["refresh_per_second"],
    )
    if args.pattern:
        app.submit_pattern(args.pattern)

    try:
        app.run()
    except KeyboardInterrupt:
        print()
        sys.exit(130)
