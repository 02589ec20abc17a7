"""Public runtime orchestration entry points.

This package groups the interactive scanner bootstrap (`run_app`) and the
lower-level state machine and event loop used by tests and composition code.
"""

from __future__ import annotations


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint so ``termios`` loads only when needed."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


__all__ = ["run_app"]
