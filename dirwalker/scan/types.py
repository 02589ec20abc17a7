"""Result, outcome, and hook datatypes shared by the scanner and its callers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import ScanError


@dataclass(frozen=True)
class ScanHooks:
    """Optional observers notified while a scan runs.

    Every callable may be ``None``; a bare ``ScanHooks()`` is a no-op sink and
    never changes what a scan returns.
    """

    on_skip_directory: Callable[[Path], None] | None = None
    on_match: Callable[[Path], None] | None = None
    on_error: Callable[[ScanError], None] | None = None

    def skipped(self, path: Path) -> None:
        if self.on_skip_directory is not None:
            self.on_skip_directory(path)

    def matched(self, path: Path) -> None:
        if self.on_match is not None:
            self.on_match(path)

    def failed(self, error: ScanError) -> None:
        if self.on_error is not None:
            self.on_error(error)


NO_HOOKS = ScanHooks()


@dataclass(frozen=True)
class ScanResult:
    """Completed scan: matched base names in traversal order plus counters."""

    root: Path
    names: tuple[str, ...] = ()
    paths: tuple[Path, ...] = ()
    files_checked: int = 0
    directories_skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class ScanOutcome:
    """Either a ``ScanResult`` or the single error that aborted the scan."""

    result: ScanResult | None = None
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


__all__ = [
    "ScanHooks",
    "NO_HOOKS",
    "ScanResult",
    "ScanOutcome",
]
