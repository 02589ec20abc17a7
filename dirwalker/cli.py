"""Command-line front door for dirwalker.

With a PATH argument, runs one scan and prints the matches. Without one,
starts the interactive terminal prompt.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .audit_log import audit_hooks, close_audit_log, setup_audit_log
from .runtime import run_app
from .runtime.app import logged_scan
from .runtime.config import load_log_settings, save_theme_name
from .scan import DEFAULT_POLICY, ScanOutcome
from .ui_theme import available_theme_names, normalize_theme_name


def report_outcome(outcome: ScanOutcome, out: TextIO) -> int:
    """Print a scan outcome for non-interactive use; returns the exit status."""
    if outcome.error is not None or outcome.result is None:
        out.write(f"An error was encountered: {outcome.error}\n")
        return 1
    result = outcome.result
    out.write(f"{result.count} files found with translation content.\n")
    for name in result.names:
        out.write(f"{name}\n")
    return 0


def scan_once(path: str | Path, log_dir: Path | None, out: TextIO) -> int:
    """Scan ``path`` with audit logging enabled and print the result."""
    handler_id = setup_audit_log(load_log_settings(log_dir))
    try:
        outcome = logged_scan(path, DEFAULT_POLICY, audit_hooks())
    finally:
        close_audit_log(handler_id)
    return report_outcome(outcome, out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirwalker",
        description="Find .js/.html files that still carry translation markers.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan. Omit to enter it at the interactive prompt.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for the rotating audit log (default: ./dirwalker_logs).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output in the interactive UI.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and either scan PATH or launch the interactive UI.

    A failed non-interactive scan exits with status 1. An explicit ``--theme``
    is saved to the config before the interactive UI starts.
    """
    args = build_parser().parse_args(argv)

    if args.path is not None:
        path = os.path.expanduser(args.path.strip())
        status = scan_once(path, args.log_dir, sys.stdout)
        if status:
            raise SystemExit(status)
        return

    if args.theme is not None:
        save_theme_name(normalize_theme_name(args.theme))
    run_app(log_dir=args.log_dir, theme_name=args.theme, no_color=args.no_color)


if __name__ == "__main__":
    main()
