"""Interactive event loops for the dashboard and the mouse tracer.

Both loops own nothing but wiring: decoding happens in ``lazydash.input``,
classification in the dashboard's ``MouseHandler``.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..input import read_key as _read_key
from ..mouse import MouseEvent, MouseHandler

if TYPE_CHECKING:
    from ..dashboard import Dashboard
    from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_ms: int = 50


def run_main_loop(
    dashboard: Dashboard,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    *,
    read_key: Callable[..., str | MouseEvent] = _read_key,
    get_terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the dashboard until it requests quit.

    Each iteration redraws when dirty or resized, waits up to
    ``timing.poll_ms`` for one input token, dispatches it, and applies any
    background preview results.
    """
    dirty = True
    size: tuple[int, int] = (0, 0)
    with terminal.raw_mode():
        terminal.set_mouse_reporting(True)
        while not dashboard.should_quit:
            term = get_terminal_size((80, 24))
            if (term.columns, term.lines) != size:
                size = (term.columns, term.lines)
                dirty = True
            if dirty:
                terminal.write_frame(dashboard.render(term.columns, term.lines))
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_ms)
            except KeyboardInterrupt:
                continue
            if isinstance(key, MouseEvent):
                dirty = dashboard.handle_mouse(key) or dirty
            elif key:
                dirty = dashboard.handle_key(key) or dirty
            dirty = dashboard.apply_preview_results() or dirty


def describe_event(event: MouseEvent) -> str:
    mods = "".join(
        flag for flag, on in (("S", event.shift), ("A", event.alt), ("C", event.ctrl)) if on
    )
    return f"{event.kind.value:<7} {event.button.value:<11} x={event.x:<4} y={event.y:<4} {mods}".rstrip()


def run_trace_loop(
    handler: MouseHandler,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    read_key: Callable[..., str | MouseEvent] = _read_key,
    get_terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
    max_rows: int | None = None,
) -> list[str]:
    """Print decoded events and their classified actions until ``q`` or Ctrl-C.

    The whole screen is one ``trace`` region split into quadrants so clicks
    and double-clicks show region ids and payloads. Only the lines that fit
    on screen are retained; they are returned on exit.
    """
    history: list[str] = []
    with terminal.raw_mode():
        terminal.set_mouse_reporting(True)
        while True:
            term = get_terminal_size((80, 24))
            half_w = max(1, term.columns // 2)
            half_h = max(1, term.lines // 2)
            handler.clear()
            for qx in range(2):
                for qy in range(2):
                    handler.hit_map.add_rect("trace", qx * half_w, qy * half_h, half_w, half_h, (qx, qy))

            rows = max_rows if max_rows is not None else max(1, term.lines - 1)
            header = "mouse trace: press q to quit"
            terminal.write_frame([header, *history[-(rows - 1) :]] if rows > 1 else [header])

            key = read_key(stdin_fd, timeout_ms=None)
            if key in {"", "q", "CTRL_C"}:
                return history
            if not isinstance(key, MouseEvent):
                continue
            action = handler.handle_mouse(key)
            data = action.region.data if action.region is not None else None
            line = (
                f"{describe_event(key)}  ->  {action.type.value} region={action.region_id} data={data}"
                f" delta={action.delta} drag=({action.drag_dx},{action.drag_dy})"
            )
            logger.debug("trace %s", line)
            history.append(line)
            del history[: -max(1, rows - 1)]


__all__ = [
    "RuntimeLoopTiming",
    "describe_event",
    "run_main_loop",
    "run_trace_loop",
]
