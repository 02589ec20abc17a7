"""Translation-marker scanner core.

This package contains the non-UI scanning primitives:
- the fixed skip/include/marker policy value
- the side-effect-free content matcher
- the depth-first tree walker and its result/error types
"""

from __future__ import annotations

from .errors import DirectoryReadError, FileReadError, ScanError
from .matcher import matches
from .policy import DEFAULT_POLICY, ScanPolicy
from .types import NO_HOOKS, ScanHooks, ScanOutcome, ScanResult
from .walker import file_extension, run_scan, scan

__all__ = [
    "DEFAULT_POLICY",
    "ScanPolicy",
    "matches",
    "scan",
    "run_scan",
    "file_extension",
    "ScanHooks",
    "NO_HOOKS",
    "ScanResult",
    "ScanOutcome",
    "ScanError",
    "DirectoryReadError",
    "FileReadError",
]
