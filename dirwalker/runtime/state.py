"""Mutable UI state and phase transitions for the interactive scanner.

The screen moves through four phases: awaiting a path, scanning, done, and
failed. Transition helpers return ``False`` when an event does not apply to
the current phase and leave the state untouched in that case.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from ..scan import ScanError, ScanOutcome, ScanResult


class AppPhase(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    SCANNING = "scanning"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PromptBuffer:
    """Single-line editable text with a cursor index."""

    text: str = ""
    cursor: int = 0

    def set(self, text: str) -> None:
        self.text = text
        self.cursor = len(text)

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self.cursor += len(chars)

    def backspace(self) -> bool:
        if self.cursor <= 0:
            return False
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1
        return True

    def delete(self) -> bool:
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]
        return True

    def move(self, delta: int) -> bool:
        target = max(0, min(len(self.text), self.cursor + delta))
        if target == self.cursor:
            return False
        self.cursor = target
        return True

    def home(self) -> bool:
        return self.move(-self.cursor)

    def end(self) -> bool:
        return self.move(len(self.text) - self.cursor)

    def kill_before_cursor(self) -> bool:
        if self.cursor == 0:
            return False
        self.text = self.text[self.cursor :]
        self.cursor = 0
        return True

    def kill_after_cursor(self) -> bool:
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[: self.cursor]
        return True


@dataclass
class AppState:
    phase: AppPhase = AppPhase.AWAITING_INPUT
    prompt: PromptBuffer = field(default_factory=PromptBuffer)
    scan_root: Path | None = None
    result: ScanResult | None = None
    error: ScanError | None = None
    spinner_frame: int = 0
    dirty: bool = True


def normalize_root_input(text: str) -> Path | None:
    """Trim the typed path and expand ``~``; blank input yields ``None``."""
    query = text.strip()
    if not query:
        return None
    return Path(query).expanduser()


def submit_path(state: AppState) -> Path | None:
    """Move from awaiting input to scanning when the prompt holds a path.

    Returns the root to scan, or ``None`` when nothing changed.
    """
    if state.phase is not AppPhase.AWAITING_INPUT:
        return None
    root = normalize_root_input(state.prompt.text)
    if root is None:
        return None
    state.phase = AppPhase.SCANNING
    state.scan_root = root
    state.result = None
    state.error = None
    state.spinner_frame = 0
    state.dirty = True
    return root


def cancel_scan(state: AppState) -> bool:
    """Return to the prompt when a submitted scan could not be started."""
    if state.phase is not AppPhase.SCANNING:
        return False
    state.phase = AppPhase.AWAITING_INPUT
    state.scan_root = None
    state.dirty = True
    return True


def finish_scan(state: AppState, outcome: ScanOutcome) -> bool:
    """Apply a finished scan outcome; only valid while scanning."""
    if state.phase is not AppPhase.SCANNING:
        return False
    if outcome.error is not None:
        state.phase = AppPhase.FAILED
        state.error = outcome.error
        state.result = None
    else:
        state.phase = AppPhase.DONE
        state.result = outcome.result
        state.error = None
    state.dirty = True
    return True


def reset(state: AppState) -> bool:
    """Return to the path prompt from a finished or failed scan."""
    if state.phase not in {AppPhase.DONE, AppPhase.FAILED}:
        return False
    state.phase = AppPhase.AWAITING_INPUT
    state.result = None
    state.error = None
    state.dirty = True
    return True


__all__ = [
    "AppPhase",
    "PromptBuffer",
    "AppState",
    "normalize_root_input",
    "submit_path",
    "cancel_scan",
    "finish_scan",
    "reset",
]
