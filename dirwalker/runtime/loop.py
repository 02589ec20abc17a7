"""Main interactive event loop for the terminal UI.

Polls keys, advances the spinner, and collects scan outcomes from the worker.
Feature logic lives in the injected callbacks and the state transitions.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..input import read_key
from ..scan import ScanOutcome
from .state import AppPhase, AppState, cancel_scan, finish_scan, reset, submit_path
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int
    spinner_frame_seconds: float


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    start_scan: Callable[[Path], bool]
    poll_scan: Callable[[], ScanOutcome | None]
    render: Callable[[AppState], None]
    on_submit: Callable[[str], None] | None = None


def _handle_prompt_key(state: AppState, key: str) -> bool:
    """Apply one editing key to the prompt; returns whether text/cursor moved."""
    prompt = state.prompt
    if key == "BACKSPACE":
        return prompt.backspace()
    if key in {"DELETE", "CTRL_D"}:
        return prompt.delete()
    if key == "LEFT":
        return prompt.move(-1)
    if key == "RIGHT":
        return prompt.move(1)
    if key in {"HOME", "CTRL_A"}:
        return prompt.home()
    if key in {"END", "CTRL_E"}:
        return prompt.end()
    if key == "CTRL_U":
        return prompt.kill_before_cursor()
    if key == "CTRL_K":
        return prompt.kill_after_cursor()
    if len(key) == 1 and key.isprintable():
        prompt.insert(key)
        return True
    return False


def handle_key(state: AppState, key: str, callbacks: RuntimeLoopCallbacks) -> bool:
    """Dispatch one key token. Returns ``True`` when the app should quit."""
    if key == "CTRL_C":
        return True

    if state.phase is AppPhase.AWAITING_INPUT:
        if key == "ENTER":
            submitted_text = state.prompt.text.strip()
            root = submit_path(state)
            if root is None:
                return False
            if callbacks.on_submit is not None:
                callbacks.on_submit(submitted_text)
            if not callbacks.start_scan(root):
                cancel_scan(state)
            return False
        if _handle_prompt_key(state, key):
            state.dirty = True
        return False

    if key == "ESC":
        reset(state)
    return False


def apply_pending_outcome(state: AppState, callbacks: RuntimeLoopCallbacks) -> bool:
    """Move a finished worker outcome into ``state``; returns whether one arrived."""
    if state.phase is not AppPhase.SCANNING:
        return False
    outcome = callbacks.poll_scan()
    if outcome is None:
        return False
    finish_scan(state, outcome)
    return True


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until CTRL+C."""
    spinner_started = time.monotonic()
    with terminal.raw_mode():
        while True:
            apply_pending_outcome(state, callbacks)

            if state.phase is AppPhase.SCANNING:
                frame = int((time.monotonic() - spinner_started) / timing.spinner_frame_seconds)
                if frame != state.spinner_frame:
                    state.spinner_frame = frame
                    state.dirty = True
            else:
                spinner_started = time.monotonic()

            if state.dirty:
                callbacks.render(state)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                break
            if key == "":
                continue
            if handle_key(state, key, callbacks):
                break


__all__ = [
    "RuntimeLoopTiming",
    "RuntimeLoopCallbacks",
    "handle_key",
    "apply_pending_outcome",
    "run_main_loop",
]
