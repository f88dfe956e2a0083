"""Bootstrap for the interactive dashboard and the mouse tracer."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..dashboard import Dashboard
from ..mouse import MouseHandler, MouseSettings
from .config import load_left_pane_percent, save_left_pane_percent
from .loop import run_main_loop, run_trace_loop
from .preview_loader import PreviewLoader
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _require_tty() -> None:
    if not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        raise SystemExit("lazydash needs an interactive terminal.")


def run_dashboard(root: Path, settings: MouseSettings) -> None:
    """Build the dashboard for ``root`` and run it until the user quits."""
    _require_tty()
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    dashboard = Dashboard(
        root,
        settings=settings,
        loader=PreviewLoader(),
        left_pane_percent=load_left_pane_percent(),
        on_resize_done=save_left_pane_percent,
    )
    logger.debug("dashboard starting at %s with %s", root, settings)
    run_main_loop(dashboard, terminal, stdin_fd)


def run_trace(settings: MouseSettings) -> None:
    """Run the mouse tracer with its own handler."""
    _require_tty()
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_trace_loop(MouseHandler(settings), terminal, stdin_fd)


__all__ = ["run_dashboard", "run_trace"]
