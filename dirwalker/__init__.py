"""Public package surface for dirwalker.

Exports ``main`` for programmatic CLI invocation.
The scanner core lives in ``dirwalker.scan``; the terminal UI in
``dirwalker.runtime``.
"""

from __future__ import annotations

__version__ = "1.0.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__"]
