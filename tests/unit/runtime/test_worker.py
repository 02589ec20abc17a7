"""Tests for the background scan worker."""

from __future__ import annotations

import tempfile
import threading
import unittest
from pathlib import Path

from dirwalker.runtime.worker import ScanWorker
from dirwalker.scan import ScanOutcome, ScanResult, run_scan


class ScanWorkerTests(unittest.TestCase):
    def test_runs_scan_and_hands_back_outcome_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.js").write_text("<Message id=1>", encoding="utf-8")
            worker = ScanWorker(run_scan)

            self.assertTrue(worker.start(root))
            outcome = worker.wait(timeout=10)

            self.assertIsNotNone(outcome)
            self.assertTrue(outcome.ok)
            self.assertEqual(outcome.result.names, ("a.js",))
            self.assertIsNone(worker.poll())
            self.assertFalse(worker.running)

    def test_rejects_second_start_while_running(self) -> None:
        release = threading.Event()

        def slow_scan(root: Path) -> ScanOutcome:
            release.wait(10)
            return ScanOutcome(result=ScanResult(root=root))

        worker = ScanWorker(slow_scan)
        self.assertTrue(worker.start(Path("/first")))
        self.assertFalse(worker.start(Path("/second")))
        self.assertIsNone(worker.poll())

        release.set()
        outcome = worker.wait(timeout=10)
        self.assertEqual(outcome.result.root, Path("/first"))
        self.assertTrue(worker.start(Path("/third")))
        self.assertEqual(worker.wait(timeout=10).result.root, Path("/third"))

    def test_unexpected_errors_are_reraised_on_poll(self) -> None:
        def broken_scan(_root: Path) -> ScanOutcome:
            raise RuntimeError("boom")

        worker = ScanWorker(broken_scan)
        worker.start(Path("/x"))

        with self.assertRaises(RuntimeError):
            worker.wait(timeout=10)
        self.assertIsNone(worker.poll())


if __name__ == "__main__":
    unittest.main()
