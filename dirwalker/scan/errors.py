"""Fatal scan errors.

Both kinds abort the scan in progress; the underlying ``OSError`` is chained
as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Base class for errors that end a scan."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class DirectoryReadError(ScanError):
    """Listing a directory failed."""

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> "DirectoryReadError":
        return cls(f"error reading directory: {exc}", path)


class FileReadError(ScanError):
    """Reading a qualifying file's contents failed."""

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> "FileReadError":
        return cls(f"error reading file {path}", path)


__all__ = [
    "ScanError",
    "DirectoryReadError",
    "FileReadError",
]
