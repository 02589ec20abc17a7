"""Fixed matching vocabulary for translation-marker scans."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanPolicy:
    """Immutable skip/include/match configuration for one scan.

    ``skip_directories`` are compared against directory names exactly.
    ``include_extensions`` include the leading dot and are case-sensitive.
    A file whose full path contains ``test_file_marker`` is never read.
    """

    skip_directories: frozenset[str]
    include_extensions: frozenset[str]
    test_file_marker: str
    markers: tuple[str, ...]

    def should_skip_directory(self, name: str) -> bool:
        return name in self.skip_directories

    def should_read_file(self, path: str, extension: str) -> bool:
        """Return whether a regular file qualifies for content matching."""
        if extension not in self.include_extensions:
            return False
        if self.test_file_marker and self.test_file_marker in path:
            return False
        return True


DEFAULT_POLICY = ScanPolicy(
    skip_directories=frozenset({"node_modules", "build", "public"}),
    include_extensions=frozenset({".js", ".html"}),
    test_file_marker="_spec",
    markers=("data-mc-translate", "<Message id="),
)


__all__ = [
    "ScanPolicy",
    "DEFAULT_POLICY",
]
