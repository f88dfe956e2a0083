"""Gesture interpretation on top of the per-frame hit map.

``MouseHandler`` turns decoded terminal mouse events into one classified
``MouseAction`` per event. It keeps the only cross-frame interaction state:
the previous click (for double-click detection), the armed drag, and the
region currently under the pointer.

Drag tracking is opt-in. A press always classifies as a click; callers that
want drag semantics for the clicked region (pane dividers, selection
anchors) call ``start_drag`` from their click handling. From then on motion
reports offsets from the anchor and the caller combines them with the value
captured at drag start, so many small motions never accumulate rounding
error. The hit map is never consulted again for an armed drag, which keeps
drags alive when a resize rebuilds the frame mid-gesture.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .actions import NO_ACTION, ActionType, EventKind, MouseAction, MouseButton, MouseEvent
from .hitmap import HitMap, Region

logger = logging.getLogger(__name__)

DEFAULT_DOUBLE_CLICK_SECONDS = 0.4
DEFAULT_DOUBLE_CLICK_DISTANCE = 0
DEFAULT_SCROLL_DELTA = 3
DEFAULT_HORIZONTAL_SCROLL_DELTA = 10


@dataclass(frozen=True)
class MouseSettings:
    """Tunable gesture thresholds.

    ``double_click_distance`` is the max Chebyshev distance in cells between
    the two presses of a double-click.
    """

    double_click_seconds: float = DEFAULT_DOUBLE_CLICK_SECONDS
    double_click_distance: int = DEFAULT_DOUBLE_CLICK_DISTANCE
    scroll_delta: int = DEFAULT_SCROLL_DELTA
    horizontal_scroll_delta: int = DEFAULT_HORIZONTAL_SCROLL_DELTA


@dataclass(frozen=True)
class ClickRecord:
    region_id: str
    data: object
    x: int
    y: int
    timestamp: float


@dataclass
class DragState:
    active: bool = False
    region_id: str = ""
    anchor_x: int = 0
    anchor_y: int = 0
    start_value: int = 0


class MouseHandler:
    """Classify mouse events against a ``HitMap`` owned by this instance.

    Each pane or modal that wants independent gesture state constructs its
    own handler; nothing here is module-global.
    """

    def __init__(
        self,
        settings: MouseSettings | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.hit_map = HitMap()
        self.settings = settings if settings is not None else MouseSettings()
        self._monotonic = monotonic
        self._last_click: ClickRecord | None = None
        self._drag = DragState()
        self._hover_region: Region | None = None

    def clear(self) -> None:
        """Clear the hit map for a new frame; gesture state is kept."""
        self.hit_map.clear()

    # Drag API

    def start_drag(self, x: int, y: int, region_id: str, start_value: int) -> None:
        """Arm drag tracking anchored at ``(x, y)``; replaces any active drag."""
        if self._drag.active:
            logger.debug("drag %r replaced by %r", self._drag.region_id, region_id)
        self._drag = DragState(
            active=True,
            region_id=region_id,
            anchor_x=x,
            anchor_y=y,
            start_value=start_value,
        )

    @property
    def is_dragging(self) -> bool:
        return self._drag.active

    def drag_region(self) -> str:
        """Region id of the current drag, or of the last one until re-armed."""
        return self._drag.region_id

    def drag_start_value(self) -> int:
        return self._drag.start_value

    def drag_delta(self, x: int, y: int) -> tuple[int, int]:
        return x - self._drag.anchor_x, y - self._drag.anchor_y

    def end_drag(self) -> None:
        self._drag.active = False

    # Hover / click state

    @property
    def hover_region(self) -> Region | None:
        return self._hover_region

    @property
    def hover_region_id(self) -> str | None:
        return self._hover_region.id if self._hover_region is not None else None

    @property
    def last_click(self) -> ClickRecord | None:
        return self._last_click

    def reset_click_history(self) -> None:
        self._last_click = None

    # Event classification

    def handle_mouse(self, event: MouseEvent) -> MouseAction:
        """Classify one event. Never raises; unmatched input yields ``NONE``/``HOVER``."""
        if event.button.is_wheel:
            if event.kind is EventKind.PRESS:
                return self._scroll_action(event)
            return NO_ACTION

        if event.kind is EventKind.PRESS:
            if self._drag.active and event.button is MouseButton.LEFT:
                # Held-button motion reported as repeated presses.
                return self._drag_action(ActionType.DRAG, event)
            if event.button is MouseButton.LEFT:
                return self._press_action(event)
            return MouseAction(ActionType.NONE, region=self.hit_map.test(event.x, event.y), x=event.x, y=event.y)

        if event.kind is EventKind.RELEASE:
            if not self._drag.active:
                return NO_ACTION
            action = self._drag_action(ActionType.DRAG_END, event)
            self.end_drag()
            logger.debug("drag %r ended at dx=%d dy=%d", self._drag.region_id, action.drag_dx, action.drag_dy)
            return action

        if self._drag.active:
            return self._drag_action(ActionType.DRAG, event)
        region = self.hit_map.test(event.x, event.y)
        self._hover_region = region
        return MouseAction(ActionType.HOVER, region=region, x=event.x, y=event.y)

    def _press_action(self, event: MouseEvent) -> MouseAction:
        region = self.hit_map.test(event.x, event.y)
        if region is None:
            self._last_click = None
            return MouseAction(ActionType.CLICK, region=None, x=event.x, y=event.y)

        now = self._monotonic()
        if self._is_double_click(region, event.x, event.y, now):
            self._last_click = None
            logger.debug("double click on %r data=%r", region.id, region.data)
            return MouseAction(ActionType.DOUBLE_CLICK, region=region, x=event.x, y=event.y)

        self._last_click = ClickRecord(region.id, region.data, event.x, event.y, now)
        return MouseAction(ActionType.CLICK, region=region, x=event.x, y=event.y)

    def _is_double_click(self, region: Region, x: int, y: int, now: float) -> bool:
        last = self._last_click
        if last is None:
            return False
        if last.region_id != region.id or last.data != region.data:
            return False
        if now - last.timestamp > self.settings.double_click_seconds:
            return False
        distance = max(abs(x - last.x), abs(y - last.y))
        return distance <= self.settings.double_click_distance

    def _drag_action(self, action_type: ActionType, event: MouseEvent) -> MouseAction:
        dx, dy = self.drag_delta(event.x, event.y)
        return MouseAction(action_type, x=event.x, y=event.y, drag_dx=dx, drag_dy=dy)

    def _scroll_action(self, event: MouseEvent) -> MouseAction:
        vertical = self.settings.scroll_delta
        horizontal = self.settings.horizontal_scroll_delta
        button = event.button
        if button is MouseButton.WHEEL_UP:
            action_type, delta = (
                (ActionType.SCROLL_LEFT, -horizontal) if event.shift else (ActionType.SCROLL_UP, -vertical)
            )
        elif button is MouseButton.WHEEL_DOWN:
            action_type, delta = (
                (ActionType.SCROLL_RIGHT, horizontal) if event.shift else (ActionType.SCROLL_DOWN, vertical)
            )
        elif button is MouseButton.WHEEL_LEFT:
            # Natural scrolling: trackpad swipe left moves content right.
            action_type, delta = ActionType.SCROLL_RIGHT, horizontal
        else:
            action_type, delta = ActionType.SCROLL_LEFT, -horizontal
        return MouseAction(
            action_type,
            region=self.hit_map.test(event.x, event.y),
            x=event.x,
            y=event.y,
            delta=delta,
        )


__all__ = [
    "ClickRecord",
    "DEFAULT_DOUBLE_CLICK_DISTANCE",
    "DEFAULT_DOUBLE_CLICK_SECONDS",
    "DEFAULT_HORIZONTAL_SCROLL_DELTA",
    "DEFAULT_SCROLL_DELTA",
    "DragState",
    "MouseHandler",
    "MouseSettings",
]
