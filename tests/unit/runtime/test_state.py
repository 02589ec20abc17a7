"""Tests for prompt editing and phase transitions."""

from __future__ import annotations

import unittest
from pathlib import Path

from dirwalker.runtime.state import (
    AppPhase,
    AppState,
    PromptBuffer,
    cancel_scan,
    finish_scan,
    normalize_root_input,
    reset,
    submit_path,
)
from dirwalker.scan import DirectoryReadError, ScanOutcome, ScanResult


class PromptBufferTests(unittest.TestCase):
    def test_insert_and_cursor_edits(self) -> None:
        prompt = PromptBuffer()
        prompt.insert("/srv")
        prompt.move(-3)
        prompt.insert("x")
        self.assertEqual((prompt.text, prompt.cursor), ("/xsrv", 2))

        self.assertTrue(prompt.backspace())
        self.assertEqual((prompt.text, prompt.cursor), ("/srv", 1))
        self.assertTrue(prompt.delete())
        self.assertEqual((prompt.text, prompt.cursor), ("/rv", 1))

    def test_bounds_are_respected(self) -> None:
        prompt = PromptBuffer()
        self.assertFalse(prompt.backspace())
        self.assertFalse(prompt.delete())
        self.assertFalse(prompt.move(-1))
        prompt.set("abc")
        self.assertFalse(prompt.move(1))
        self.assertTrue(prompt.home())
        self.assertFalse(prompt.home())
        self.assertTrue(prompt.end())

    def test_kill_commands(self) -> None:
        prompt = PromptBuffer()
        prompt.set("/home/user/project")
        prompt.move(-7)
        self.assertTrue(prompt.kill_after_cursor())
        self.assertEqual(prompt.text, "/home/user/")
        prompt.move(-5)
        self.assertTrue(prompt.kill_before_cursor())
        self.assertEqual((prompt.text, prompt.cursor), ("user/", 0))


class PhaseTransitionTests(unittest.TestCase):
    def test_normalize_root_input(self) -> None:
        self.assertIsNone(normalize_root_input("   "))
        self.assertEqual(normalize_root_input("  /srv/app \t"), Path("/srv/app"))
        self.assertEqual(normalize_root_input("~/code"), Path("~/code").expanduser())

    def test_blank_submission_keeps_prompt(self) -> None:
        state = AppState()
        state.prompt.set("  ")
        self.assertIsNone(submit_path(state))
        self.assertIs(state.phase, AppPhase.AWAITING_INPUT)

    def test_full_success_cycle(self) -> None:
        state = AppState()
        state.prompt.set("/srv/app")

        root = submit_path(state)
        self.assertEqual(root, Path("/srv/app"))
        self.assertIs(state.phase, AppPhase.SCANNING)
        self.assertIsNone(submit_path(state))
        self.assertFalse(reset(state))

        result = ScanResult(root=root, names=("a.js",), paths=(root / "a.js",), files_checked=1)
        self.assertTrue(finish_scan(state, ScanOutcome(result=result)))
        self.assertIs(state.phase, AppPhase.DONE)
        self.assertEqual(state.result, result)

        self.assertTrue(reset(state))
        self.assertIs(state.phase, AppPhase.AWAITING_INPUT)
        self.assertIsNone(state.result)
        self.assertEqual(state.prompt.text, "/srv/app")

    def test_failure_cycle(self) -> None:
        state = AppState()
        state.prompt.set("/missing")
        submit_path(state)
        error = DirectoryReadError("error reading directory: boom", Path("/missing"))

        finish_scan(state, ScanOutcome(error=error))

        self.assertIs(state.phase, AppPhase.FAILED)
        self.assertIs(state.error, error)
        self.assertIsNone(state.result)
        self.assertTrue(reset(state))
        self.assertIsNone(state.error)

    def test_finish_outside_scanning_is_ignored(self) -> None:
        state = AppState()
        self.assertFalse(finish_scan(state, ScanOutcome(result=ScanResult(root=Path("/")))))
        self.assertIs(state.phase, AppPhase.AWAITING_INPUT)

    def test_cancel_scan_restores_prompt_phase(self) -> None:
        state = AppState()
        self.assertFalse(cancel_scan(state))
        state.prompt.set("/srv")
        submit_path(state)

        self.assertTrue(cancel_scan(state))
        self.assertIs(state.phase, AppPhase.AWAITING_INPUT)
        self.assertIsNone(state.scan_root)
        self.assertEqual(state.prompt.text, "/srv")


if __name__ == "__main__":
    unittest.main()
