"""Session runtime: event loop, task workers, terminal, config and logging."""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the session wiring so config helpers stay importable alone."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = ["run_browser"]
