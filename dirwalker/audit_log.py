"""Rotating audit log for scan events.

Wires loguru to one size-rotated file under the log directory and exposes
``ScanHooks`` that record skipped folders, matched files, and scan errors.
The default stderr sink is dropped so log output never lands on the TUI.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .scan import ScanError, ScanHooks

LOG_DIRECTORY_NAME = "dirwalker_logs"
LOG_FILE_NAME = "dirwalker.log"
DEFAULT_MAX_SIZE_MB = 10
DEFAULT_MAX_BACKUPS = 10
DEFAULT_MAX_AGE_DAYS = 10

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


@dataclass(frozen=True)
class LogSettings:
    """Where the audit log lives and how it rotates."""

    log_dir: Path
    max_size_mb: int = DEFAULT_MAX_SIZE_MB
    max_backups: int = DEFAULT_MAX_BACKUPS
    max_age_days: int = DEFAULT_MAX_AGE_DAYS
    level: str = "INFO"

    @property
    def log_path(self) -> Path:
        return self.log_dir / LOG_FILE_NAME


def default_log_dir() -> Path:
    return Path.cwd() / LOG_DIRECTORY_NAME


def make_retention(max_backups: int, max_age_days: int) -> Callable[[list[str]], None]:
    """Build a loguru retention callable pruning by count and by age.

    Loguru calls it with every rotated file matching the sink pattern. Files
    older than ``max_age_days`` are removed, then only the newest
    ``max_backups`` survivors are kept.
    """
    max_age_seconds = max_age_days * 24 * 60 * 60

    def retention(log_files: list[str]) -> None:
        now = time.time()
        dated: list[tuple[float, str]] = []
        for log_file in log_files:
            try:
                mtime = os.stat(log_file).st_mtime
            except OSError:
                continue
            if max_age_seconds > 0 and now - mtime > max_age_seconds:
                os.remove(log_file)
                continue
            dated.append((mtime, log_file))

        dated.sort(reverse=True)
        for _mtime, log_file in dated[max(0, max_backups):]:
            os.remove(log_file)

    return retention


def setup_audit_log(settings: LogSettings) -> int:
    """Replace loguru sinks with the rotating audit file; return its handler id."""
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    logger.remove()
    handler_id = logger.add(
        settings.log_path,
        format=LOG_FORMAT,
        level=settings.level,
        rotation=f"{settings.max_size_mb} MB",
        retention=make_retention(settings.max_backups, settings.max_age_days),
        encoding="utf-8",
    )
    logger.info("👋 Welcome ")
    return handler_id


def close_audit_log(handler_id: int) -> None:
    logger.remove(handler_id)


def _log_skip(path: Path) -> None:
    logger.info(f"❌ Skipping folder: {path}")


def _log_match(path: Path) -> None:
    logger.info(f"Matched entry in file → {path}")


def _log_error(error: ScanError) -> None:
    cause = error.__cause__
    if cause is not None:
        logger.error(f"{error} ({cause})")
    else:
        logger.error(str(error))


def audit_hooks() -> ScanHooks:
    """Return ``ScanHooks`` that write every scan event to the audit log."""
    return ScanHooks(
        on_skip_directory=_log_skip,
        on_match=_log_match,
        on_error=_log_error,
    )


def log_scan_started(root: str | Path) -> None:
    logger.info(f"📂 Starting scan of: {root}")


def log_scan_finished(root: str | Path, match_count: int, files_checked: int) -> None:
    logger.info(f"✅ Scan of {root} complete. {match_count}/{files_checked} checked files matched.")


__all__ = [
    "LOG_DIRECTORY_NAME",
    "LOG_FILE_NAME",
    "DEFAULT_MAX_SIZE_MB",
    "DEFAULT_MAX_BACKUPS",
    "DEFAULT_MAX_AGE_DAYS",
    "LogSettings",
    "default_log_dir",
    "make_retention",
    "setup_audit_log",
    "close_audit_log",
    "audit_hooks",
    "log_scan_started",
    "log_scan_finished",
]
