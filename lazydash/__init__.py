"""Public package surface for lazydash.

Exports ``main`` for programmatic CLI invocation. The mouse hit-testing
core lives in ``lazydash.mouse``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
