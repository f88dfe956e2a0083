"""Selectable, scrollable list pane.

Registers one row region per visible item (payload: absolute item index)
over a pane-wide background region, and interprets classified mouse
actions against its own cursor/offset state.
"""

from __future__ import annotations

from collections.abc import Callable

from ..ansi import REVERSE, RESET, fit_ansi_line
from ..mouse import ActionType, HitMap, MouseAction, Rect, clamp

HOVER_STYLE = "\x1b[4m"


class ListPane:
    def __init__(
        self,
        items: list[str] | None = None,
        *,
        row_region_id: str = "list-row",
        pane_region_id: str = "list-pane",
        on_activate: Callable[[int], None] | None = None,
    ) -> None:
        self.items: list[str] = list(items or [])
        self.row_region_id = row_region_id
        self.pane_region_id = pane_region_id
        self.on_activate = on_activate
        self.cursor = 0
        self.offset = 0
        self.height = 0
        self.hover_index = -1
        self.rect = Rect(0, 0, 0, 0)

    def set_items(self, items: list[str]) -> None:
        self.items = list(items)
        self.cursor = clamp(self.cursor, 0, max(0, len(self.items) - 1))
        self.offset = clamp(self.offset, 0, self.max_offset)
        self.hover_index = -1

    @property
    def max_offset(self) -> int:
        return max(0, len(self.items) - self.height)

    def visible_indices(self) -> range:
        return range(self.offset, min(len(self.items), self.offset + self.height))

    def register(self, hit_map: HitMap, x: int, y: int, width: int, height: int) -> None:
        """Register this frame's regions; the pane background goes first so rows win."""
        self.rect = Rect.of(x, y, width, height)
        self.height = self.rect.height
        self.offset = clamp(self.offset, 0, self.max_offset)
        hit_map.add(self.pane_region_id, self.rect)
        for row, idx in enumerate(self.visible_indices()):
            hit_map.add_rect(self.row_region_id, x, y + row, width, 1, idx)

    def ensure_cursor_visible(self) -> None:
        if self.height <= 0:
            return
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.height:
            self.offset = self.cursor - self.height + 1

    def move_cursor(self, delta: int) -> bool:
        if not self.items:
            return False
        target = clamp(self.cursor + delta, 0, len(self.items) - 1)
        if target == self.cursor:
            return False
        self.cursor = target
        self.ensure_cursor_visible()
        return True

    def select(self, index: int) -> bool:
        if not (0 <= index < len(self.items)) or index == self.cursor:
            return False
        self.cursor = index
        self.ensure_cursor_visible()
        return True

    def scroll(self, delta: int) -> bool:
        target = clamp(self.offset + delta, 0, self.max_offset)
        if target == self.offset:
            return False
        self.offset = target
        return True

    def activate(self, index: int | None = None) -> bool:
        target = self.cursor if index is None else index
        if not (0 <= target < len(self.items)):
            return False
        self.cursor = target
        if self.on_activate is not None:
            self.on_activate(target)
        return True

    def handle_action(self, action: MouseAction) -> bool:
        """Apply one classified action; returns whether anything changed."""
        region = action.region
        on_row = region is not None and region.id == self.row_region_id
        if action.type is ActionType.CLICK and on_row:
            return self.select(int(region.data))
        if action.type is ActionType.DOUBLE_CLICK and on_row:
            return self.activate(int(region.data))
        if action.type.is_vertical_scroll:
            return self.scroll(action.delta)
        if action.type is ActionType.HOVER:
            hover = int(region.data) if on_row else -1
            if hover == self.hover_index:
                return False
            self.hover_index = hover
            return True
        return False

    def render_rows(self, width: int) -> list[str]:
        """Rows for the current viewport, padded to ``height``."""
        rows: list[str] = []
        for idx in self.visible_indices():
            text = fit_ansi_line(" " + self.items[idx], width)
            if idx == self.cursor:
                text = f"{REVERSE}{text}{RESET}"
            elif idx == self.hover_index:
                text = f"{HOVER_STYLE}{text}{RESET}"
            rows.append(text)
        while len(rows) < self.height:
            rows.append(" " * max(0, width))
        return rows


__all__ = ["ListPane"]
