"""Background scan dispatch for the interactive loop."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

from ..scan import ScanOutcome


class ScanWorker:
    """Run one scan at a time on a daemon thread and hand back its outcome.

    ``run_scan`` returns a ``ScanOutcome``; the loop picks it up with ``poll``
    so only the worker thread touches the scan accumulator. Anything else the
    scan raises is re-raised from ``poll`` on the calling thread.
    """

    def __init__(self, run_scan: Callable[[Path], ScanOutcome]) -> None:
        self._run_scan = run_scan
        self._lock = threading.Lock()
        self._outcome: ScanOutcome | None = None
        self._failure: BaseException | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def _worker(self, root: Path) -> None:
        try:
            outcome = self._run_scan(root)
        except Exception as exc:
            with self._lock:
                self._failure = exc
            return
        with self._lock:
            self._outcome = outcome

    def start(self, root: Path) -> bool:
        """Start scanning ``root``; returns ``False`` if a scan is in flight."""
        if self.running:
            return False
        with self._lock:
            self._outcome = None
            self._failure = None
        self._thread = threading.Thread(
            target=self._worker,
            args=(root,),
            name="dirwalker-scan",
            daemon=True,
        )
        self._thread.start()
        return True

    def poll(self) -> ScanOutcome | None:
        """Return and clear the finished outcome, or ``None`` while pending."""
        with self._lock:
            failure = self._failure
            outcome = self._outcome
            self._failure = None
            self._outcome = None
        if failure is not None:
            raise failure
        return outcome

    def wait(self, timeout: float | None = None) -> ScanOutcome | None:
        """Block until the current scan finishes, then ``poll``."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return self.poll()


__all__ = [
    "ScanWorker",
]
