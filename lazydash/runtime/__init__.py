"""Public runtime orchestration entry points.

Groups the interactive bootstrap (``run_dashboard``, ``run_trace``) and the
lower-level event loops used by tests and composition code.
"""

from __future__ import annotations


def run_dashboard(*args, **kwargs):
    """Lazily import the dashboard bootstrap to avoid package-import cycles."""
    from .app import run_dashboard as _run_dashboard

    return _run_dashboard(*args, **kwargs)


def run_trace(*args, **kwargs):
    from .app import run_trace as _run_trace

    return _run_trace(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_dashboard",
    "run_main_loop",
    "run_trace",
]
