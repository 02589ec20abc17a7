"""Depth-first tree walker collecting files that contain translation markers.

``scan`` raises on the first unreadable directory or file; ``run_scan`` wraps
the same traversal into a ``ScanOutcome`` value for UI callers.
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import DirectoryReadError, FileReadError, ScanError
from .matcher import matches
from .policy import DEFAULT_POLICY, ScanPolicy
from .types import NO_HOOKS, ScanHooks, ScanOutcome, ScanResult

ENTRY_DIRECTORY = "dir"
ENTRY_FILE = "file"
ENTRY_OTHER = "other"


@dataclass
class _MatchAccumulator:
    names: list[str] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    files_checked: int = 0
    directories_skipped: int = 0

    def add(self, path: Path) -> None:
        self.names.append(path.name)
        self.paths.append(path)

    def freeze(self, root: Path) -> ScanResult:
        return ScanResult(
            root=root,
            names=tuple(self.names),
            paths=tuple(self.paths),
            files_checked=self.files_checked,
            directories_skipped=self.directories_skipped,
        )


def file_extension(name: str) -> str:
    """Return the suffix from the last ``.`` of ``name``, or ``""``.

    Unlike ``Path.suffix`` a dotfile such as ``.js`` keeps its whole name.
    """
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def _entry_kind(entry: os.DirEntry) -> str:
    """Classify an entry; symlinked directories are never descended."""
    try:
        if entry.is_dir(follow_symlinks=False):
            return ENTRY_DIRECTORY
        if entry.is_file():
            return ENTRY_FILE
    except OSError:
        pass
    return ENTRY_OTHER


def list_entries(directory: str | Path) -> list[tuple[str, str]]:
    """Return ``(name, kind)`` pairs for ``directory`` sorted by name.

    Raises ``OSError`` when the directory cannot be listed.
    """
    with os.scandir(directory) as entries:
        listed = [(entry.name, _entry_kind(entry)) for entry in entries]
    listed.sort(key=lambda item: item[0])
    return listed


def read_file_bytes(path: Path) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _walk(
    directory: Path,
    policy: ScanPolicy,
    hooks: ScanHooks,
    acc: _MatchAccumulator,
) -> None:
    try:
        entries = list_entries(directory)
    except OSError as exc:
        raise DirectoryReadError.from_os_error(directory, exc) from exc

    for name, kind in entries:
        child = directory / name
        if kind == ENTRY_DIRECTORY:
            if policy.should_skip_directory(name):
                acc.directories_skipped += 1
                hooks.skipped(child)
                continue
            _walk(child, policy, hooks, acc)
            continue
        if kind != ENTRY_FILE:
            continue
        if not policy.should_read_file(str(child), file_extension(name)):
            continue

        try:
            raw = read_file_bytes(child)
        except OSError as exc:
            raise FileReadError.from_os_error(child, exc) from exc
        acc.files_checked += 1
        if matches(raw, policy):
            acc.add(child)
            hooks.matched(child)


def _reject_empty_root(raw_root: str, root_path: Path) -> None:
    # Path("") means ".", but listing "" itself fails.
    try:
        list_entries(raw_root)
    except OSError as exc:
        raise DirectoryReadError.from_os_error(root_path, exc) from exc
    missing = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), raw_root)
    raise DirectoryReadError.from_os_error(root_path, missing) from missing


def scan(
    root: str | os.PathLike[str],
    policy: ScanPolicy = DEFAULT_POLICY,
    hooks: ScanHooks | None = None,
) -> ScanResult:
    """Scan ``root`` recursively and return the files containing a marker.

    Raises ``DirectoryReadError`` or ``FileReadError`` for the first failure;
    no partial result survives an error. ``hooks`` receives skip, match, and
    error notifications and never affects the returned result.
    """
    active_hooks = hooks if hooks is not None else NO_HOOKS
    raw_root = os.fspath(root)
    root_path = Path(raw_root)
    acc = _MatchAccumulator()
    try:
        if not raw_root:
            _reject_empty_root(raw_root, root_path)
        _walk(root_path, policy, active_hooks, acc)
    except ScanError as exc:
        active_hooks.failed(exc)
        raise
    return acc.freeze(root_path)


def run_scan(
    root: str | os.PathLike[str],
    policy: ScanPolicy = DEFAULT_POLICY,
    hooks: ScanHooks | None = None,
) -> ScanOutcome:
    """Run ``scan`` and fold a ``ScanError`` into the returned outcome."""
    try:
        return ScanOutcome(result=scan(root, policy, hooks))
    except ScanError as exc:
        return ScanOutcome(error=exc)


__all__ = [
    "file_extension",
    "list_entries",
    "read_file_bytes",
    "scan",
    "run_scan",
]
