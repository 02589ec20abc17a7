"""Interactive scanner composition root.

Builds state from persisted preferences, wires the audit log into the scan
hooks, and hands control to ``run_main_loop``.
"""

from __future__ import annotations

import sys
from pathlib import Path

from ..audit_log import (
    audit_hooks,
    close_audit_log,
    log_scan_finished,
    log_scan_started,
    setup_audit_log,
)
from ..scan import DEFAULT_POLICY, ScanHooks, ScanOutcome, ScanPolicy, run_scan
from ..ui_theme import resolve_theme
from .config import load_last_root, load_log_settings, load_theme_name, save_last_root
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .screen import render_screen
from .state import AppState
from .terminal import TerminalController
from .worker import ScanWorker

KEY_POLL_MS = 80
SPINNER_FRAME_SECONDS = 0.1


def logged_scan(root: str | Path, policy: ScanPolicy, hooks: ScanHooks) -> ScanOutcome:
    """Run one scan, recording start and completion in the audit log."""
    log_scan_started(root)
    outcome = run_scan(root, policy, hooks)
    if outcome.result is not None:
        log_scan_finished(root, outcome.result.count, outcome.result.files_checked)
    return outcome


def build_initial_state() -> AppState:
    """Create the prompt state, prefilled with the last submitted root."""
    state = AppState()
    last_root = load_last_root()
    if last_root:
        state.prompt.set(last_root)
    return state


def run_app(
    log_dir: Path | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    policy: ScanPolicy = DEFAULT_POLICY,
) -> None:
    """Run the interactive scanner until the user quits with CTRL+C."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("Interactive mode needs a terminal; pass a PATH to scan non-interactively.")

    handler_id = setup_audit_log(load_log_settings(log_dir))
    try:
        theme = resolve_theme(theme_name or load_theme_name(), no_color=no_color)
        hooks = audit_hooks()
        worker = ScanWorker(lambda root: logged_scan(root, policy, hooks))
        state = build_initial_state()

        stdin_fd = sys.stdin.fileno()
        terminal = TerminalController(stdin_fd, sys.stdout.fileno())
        callbacks = RuntimeLoopCallbacks(
            start_scan=worker.start,
            poll_scan=worker.poll,
            render=lambda current: render_screen(terminal, current, theme),
            on_submit=save_last_root,
        )
        run_main_loop(
            state=state,
            terminal=terminal,
            stdin_fd=stdin_fd,
            timing=RuntimeLoopTiming(
                key_poll_ms=KEY_POLL_MS,
                spinner_frame_seconds=SPINNER_FRAME_SECONDS,
            ),
            callbacks=callbacks,
        )
    finally:
        close_audit_log(handler_id)
