"""Two-pane horizontal split with a draggable divider.

The divider resizes through the handler's drag API: a click on the divider
arms a drag with the current left width as start value, and each drag
motion recomputes ``start + dx`` rather than accumulating deltas.
"""

from __future__ import annotations

from collections.abc import Callable

from ..mouse import ActionType, HitMap, MouseAction, MouseHandler, Rect, clamp

DIVIDER_WIDTH = 1
DIVIDER_CHAR = "│"
DIVIDER_DRAG_CHAR = "┃"


def compute_left_width(total_width: int) -> int:
    """Choose default left-pane width from total terminal width."""
    if total_width <= 60:
        return max(16, total_width // 2)
    return max(20, min(40, total_width // 3))


def clamp_left_width(total_width: int, desired_left: int, min_left: int = 12, min_right: int = 12) -> int:
    """Clamp requested left-pane width so both panes keep their minimum."""
    max_possible = max(1, total_width - DIVIDER_WIDTH - 1)
    min_left = max(1, min(min_left, total_width - min_right))
    max_left = max(min_left, total_width - DIVIDER_WIDTH - min_right)
    max_left = min(max_left, max_possible)
    min_left = min(min_left, max_left)
    return clamp(desired_left, min_left, max_left)


class SplitLayout:
    def __init__(
        self,
        total_width: int,
        left_width: int | None = None,
        *,
        min_left: int = 12,
        min_right: int = 12,
        sidebar_region_id: str = "sidebar",
        main_region_id: str = "main",
        divider_region_id: str = "pane-divider",
        on_resize_done: Callable[[int, int], None] | None = None,
    ) -> None:
        self.min_left = min_left
        self.min_right = min_right
        self.sidebar_region_id = sidebar_region_id
        self.main_region_id = main_region_id
        self.divider_region_id = divider_region_id
        self.on_resize_done = on_resize_done
        self.total_width = max(0, total_width)
        desired = compute_left_width(self.total_width) if left_width is None else left_width
        self.left_width = self._clamp(desired)
        self.dragging = False

    def _clamp(self, desired: int) -> int:
        return clamp_left_width(self.total_width, desired, self.min_left, self.min_right)

    @property
    def right_width(self) -> int:
        return max(0, self.total_width - self.left_width - DIVIDER_WIDTH)

    def resize(self, total_width: int) -> None:
        """Adopt a new terminal width, keeping the left pane within bounds."""
        self.total_width = max(0, total_width)
        self.left_width = self._clamp(self.left_width)

    def set_left_percent(self, percent: float) -> None:
        self.left_width = self._clamp(round(self.total_width * percent / 100.0))

    def sidebar_rect(self, y: int, height: int) -> Rect:
        return Rect.of(0, y, self.left_width, height)

    def divider_rect(self, y: int, height: int) -> Rect:
        return Rect.of(self.left_width, y, DIVIDER_WIDTH, height)

    def main_rect(self, y: int, height: int) -> Rect:
        return Rect.of(self.left_width + DIVIDER_WIDTH, y, self.right_width, height)

    def register(self, hit_map: HitMap, y: int, height: int) -> None:
        hit_map.add(self.sidebar_region_id, self.sidebar_rect(y, height))
        hit_map.add(self.main_region_id, self.main_rect(y, height))
        hit_map.add(self.divider_region_id, self.divider_rect(y, height))

    def divider_char(self) -> str:
        return DIVIDER_DRAG_CHAR if self.dragging else DIVIDER_CHAR

    def handle_action(self, action: MouseAction, handler: MouseHandler) -> bool:
        """Drive divider resizing; returns whether the layout changed."""
        if action.type in (ActionType.CLICK, ActionType.DOUBLE_CLICK):
            if action.region is None or action.region.id != self.divider_region_id:
                return False
            handler.start_drag(action.x, action.y, self.divider_region_id, self.left_width)
            self.dragging = True
            return True

        if handler.drag_region() != self.divider_region_id:
            return False

        if action.type is ActionType.DRAG:
            new_width = self._clamp(handler.drag_start_value() + action.drag_dx)
            if new_width == self.left_width:
                return False
            self.left_width = new_width
            return True

        if action.type is ActionType.DRAG_END and self.dragging:
            self.dragging = False
            if self.on_resize_done is not None:
                self.on_resize_done(self.total_width, self.left_width)
            return True
        return False


__all__ = [
    "DIVIDER_WIDTH",
    "SplitLayout",
    "clamp_left_width",
    "compute_left_width",
]
