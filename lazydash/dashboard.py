"""Split-pane file dashboard wired to the mouse core.

The dashboard owns one ``MouseHandler``. ``render`` rebuilds the hit map from
scratch on every frame in stacking order (header, split panes, file rows,
detail pane, then the modal overlay), and ``handle_mouse`` classifies each
event once and dispatches on the action type and region id.

File previews load on a background thread. Every request is stamped with
the current epoch and results from an older epoch (the root directory
changed in the meantime) are dropped when drained.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .ansi import DIM, RESET, fit_ansi_line, strip_ansi, visual_substring
from .mouse import (
    ActionType,
    EventKind,
    MouseAction,
    MouseButton,
    MouseEvent,
    MouseHandler,
    MouseSettings,
    Rect,
    ScrollbarParams,
    SelectionState,
    clamp,
    offset_for_track_row,
    render_scrollbar,
)
from .panes import ConfirmModal, ListPane, ModalButton, SplitLayout, is_background_region
from .runtime.epoch import EpochCounter
from .runtime.preview_loader import PreviewLoader, PreviewResult

logger = logging.getLogger(__name__)

SELECTION_STYLE = "\x1b[7m"
CLOSE_LABEL = "[x]"


class DashboardRegion(str, Enum):
    HEADER_CLOSE = "header-close"
    SIDEBAR = "sidebar"
    FILE_ROW = "file-row"
    PANE_DIVIDER = "pane-divider"
    MAIN = "main"
    DETAIL = "detail-pane"
    SCROLLBAR = "detail-scrollbar"

    def __str__(self) -> str:
        return self.value


_BACKGROUND_DRAGS = frozenset({DashboardRegion.PANE_DIVIDER, DashboardRegion.DETAIL, DashboardRegion.SCROLLBAR})


def list_entries(root: Path) -> list[Path]:
    """Directory children with folders first, preceded by the parent link."""
    try:
        children = list(root.iterdir())
    except OSError as exc:
        logger.debug("cannot list %s: %s", root, exc)
        children = []
    children.sort(key=lambda child: (not child.is_dir(), child.name.lower()))
    if root.parent != root:
        children.insert(0, root.parent)
    return children


class Dashboard:
    def __init__(
        self,
        root: Path,
        *,
        settings: MouseSettings | None = None,
        loader: PreviewLoader | None = None,
        left_pane_percent: float | None = None,
        on_resize_done: Callable[[int, int], None] | None = None,
        monotonic: Callable[[], float] | None = None,
    ) -> None:
        if monotonic is None:
            self.handler = MouseHandler(settings)
        else:
            self.handler = MouseHandler(settings, monotonic=monotonic)
        self.loader = loader if loader is not None else PreviewLoader()
        self.epoch = EpochCounter()
        self.split = SplitLayout(
            80,
            sidebar_region_id=DashboardRegion.SIDEBAR,
            main_region_id=DashboardRegion.MAIN,
            divider_region_id=DashboardRegion.PANE_DIVIDER,
            on_resize_done=on_resize_done,
        )
        self._left_pane_percent = left_pane_percent
        self.files = ListPane(
            row_region_id=DashboardRegion.FILE_ROW,
            pane_region_id=DashboardRegion.SIDEBAR,
            on_activate=self._activate_entry,
        )
        self.modal = ConfirmModal(
            "Quit lazydash?",
            "Close the dashboard and restore the terminal.",
            (ModalButton("confirm", "Quit"), ModalButton("cancel", "Stay")),
            on_choice=self._on_modal_choice,
        )
        self.selection = SelectionState()
        self.root = root.resolve()
        self.entries: list[Path] = []
        self.preview_path: Path | None = None
        self.preview_lines: list[str] = []
        self.detail_offset = 0
        self.detail_text_x = 0
        self.focus = "list"
        self.status = ""
        self.last_action: MouseAction | None = None
        self.should_quit = False
        self.columns = 0
        self.rows = 0
        self._detail_rect = Rect(0, 0, 0, 0)
        self._track_rect = Rect(0, 0, 0, 0)
        self._load_root(self.root)

    # Navigation

    def _load_root(self, root: Path) -> None:
        self.root = root
        self.entries = list_entries(root)
        labels: list[str] = []
        for entry in self.entries:
            if entry == root.parent and root.parent != root:
                labels.append("../")
            else:
                labels.append(entry.name + ("/" if entry.is_dir() else ""))
        self.files.set_items(labels)
        self.files.cursor = 0
        self.files.offset = 0
        self.preview_path = None
        self.preview_lines = []
        self.selection.clear()

    def change_root(self, root: Path) -> None:
        """Switch directories; in-flight previews from the old root become stale."""
        self.epoch.advance()
        self._load_root(root.resolve())
        self.status = str(self.root)

    def selected_entry(self) -> Path | None:
        if 0 <= self.files.cursor < len(self.entries):
            return self.entries[self.files.cursor]
        return None

    def preview_selected(self) -> None:
        entry = self.selected_entry()
        if entry is None or entry == self.preview_path:
            return
        self.preview_path = entry
        self.preview_lines = ["loading..."]
        self.detail_offset = 0
        self.detail_text_x = 0
        self.selection.clear()
        self.loader.schedule(self.epoch.stamp(entry))

    def _activate_entry(self, index: int) -> None:
        entry = self.entries[index]
        if entry.is_dir():
            self.change_root(entry)
            return
        self.focus = "detail"
        self.status = f"opened {entry.name}"
        self.preview_selected()

    def apply_preview_results(self) -> bool:
        """Apply drained preview results, discarding stale ones."""
        changed = False
        for result in self.loader.drain_results():
            if not self._accepts(result):
                logger.debug(
                    "dropping stale preview %s (epoch %d, current %d)",
                    result.request.path,
                    result.epoch,
                    self.epoch.current,
                )
                continue
            self.preview_lines = [f"error: {result.error}"] if result.error else list(result.lines)
            self.detail_offset = 0
            changed = True
        return changed

    def _accepts(self, result: PreviewResult) -> bool:
        return self.epoch.is_current(result.epoch) and result.request.path == self.preview_path

    def _on_modal_choice(self, choice: str) -> None:
        if choice == "confirm":
            self.should_quit = True

    # Layout helpers

    def _detail_max_offset(self) -> int:
        return max(0, len(self.preview_lines) - self._detail_rect.height)

    def _scrollbar_params(self) -> ScrollbarParams:
        return ScrollbarParams(
            total_items=len(self.preview_lines),
            scroll_offset=self.detail_offset,
            visible_items=self._detail_rect.height,
            track_height=self._track_rect.height,
        )

    def _selection_pos(self, x: int, y: int) -> tuple[int, int] | None:
        rect = self._detail_rect
        if rect.is_empty() or not self.preview_lines:
            return None
        row = clamp(y - rect.y, 0, rect.height - 1)
        col = max(0, x - rect.x) + self.detail_text_x
        line = clamp(self.detail_offset + row, 0, len(self.preview_lines) - 1)
        return line, col

    # Rendering

    def render(self, columns: int, rows: int) -> list[str]:
        """Build frame rows and re-register every hit region for this frame."""
        if columns != self.columns and self._left_pane_percent is not None:
            self.split.resize(columns)
            self.split.set_left_percent(self._left_pane_percent)
            self._left_pane_percent = None
        self.columns = columns
        self.rows = rows
        self.split.resize(columns)

        hit_map = self.handler.hit_map
        self.handler.clear()
        body_y = 1
        body_height = max(0, rows - 2)

        close_x = max(0, columns - len(CLOSE_LABEL))
        hit_map.add_rect(DashboardRegion.HEADER_CLOSE, close_x, 0, len(CLOSE_LABEL), 1)
        self.split.register(hit_map, body_y, body_height)

        sidebar = self.split.sidebar_rect(body_y, body_height)
        self.files.register(hit_map, sidebar.x, sidebar.y, sidebar.width, sidebar.height)

        main = self.split.main_rect(body_y, body_height)
        self._detail_rect = Rect.of(main.x, main.y, main.width - 1, main.height)
        self._track_rect = Rect.of(main.right - 1, main.y, 1 if main.width > 0 else 0, main.height)
        self.detail_offset = clamp(self.detail_offset, 0, self._detail_max_offset())
        hit_map.add(DashboardRegion.DETAIL, self._detail_rect)
        hit_map.add(DashboardRegion.SCROLLBAR, self._track_rect)

        self.modal.register(hit_map, columns, rows)
        self._sync_hover()

        lines = [self._render_header(columns)]
        list_rows = self.files.render_rows(sidebar.width)
        detail_rows = self._render_detail_rows()
        track = render_scrollbar(self._scrollbar_params())
        divider = self.split.divider_char()
        for row in range(body_height):
            track_char = track[row] if row < len(track) else ""
            lines.append(list_rows[row] + divider + detail_rows[row] + track_char)
        lines.append(fit_ansi_line(self._status_line(), columns))

        if self.modal.is_open:
            lines = self._overlay_modal(lines, columns)
        return lines[:rows]

    def _sync_hover(self) -> None:
        hover = self.handler.hover_region
        if hover is None or hover.id != DashboardRegion.FILE_ROW:
            self.files.hover_index = -1

    def _render_header(self, columns: int) -> str:
        title = f" lazydash  {self.root}"
        return fit_ansi_line(title, max(0, columns - len(CLOSE_LABEL))) + CLOSE_LABEL[: max(0, columns)]

    def _render_detail_rows(self) -> list[str]:
        rect = self._detail_rect
        out: list[str] = []
        for row in range(rect.height):
            line_idx = self.detail_offset + row
            if line_idx >= len(self.preview_lines):
                out.append(" " * rect.width)
                continue
            text = visual_substring(self.preview_lines[line_idx], self.detail_text_x)
            start_col, end_col = self.selection.line_selection_cols(line_idx)
            if start_col >= 0:
                local_start = max(0, start_col - self.detail_text_x)
                local_end = -1 if end_col < 0 else max(0, end_col + 1 - self.detail_text_x)
                text = (
                    visual_substring(text, 0, local_start)
                    + SELECTION_STYLE
                    + visual_substring(text, local_start, local_end)
                    + RESET
                    + ("" if local_end < 0 else visual_substring(text, local_end))
                )
            out.append(fit_ansi_line(text, rect.width))
        return out

    def _status_line(self) -> str:
        action = self.last_action
        summary = "-"
        if action is not None:
            summary = f"{action.type.value} {action.region_id or '-'} @{action.x},{action.y}"
        return f" {summary}  {self.status}"

    def _overlay_modal(self, lines: list[str], columns: int) -> list[str]:
        rect = self.modal.rect
        box = self.modal.render_box()
        out: list[str] = []
        for row, line in enumerate(lines):
            plain = strip_ansi(line)
            if rect.y <= row < rect.bottom:
                box_row = box[row - rect.y]
                left = visual_substring(plain, 0, rect.x)
                right = visual_substring(plain, rect.right)
                out.append(f"{DIM}{left}{RESET}{box_row}{DIM}{right}{RESET}")
            else:
                out.append(f"{DIM}{plain}{RESET}")
        return out

    # Input

    def handle_mouse(self, event: MouseEvent) -> bool:
        """Classify ``event`` once and dispatch it; returns whether to redraw."""
        action = self.handler.handle_mouse(event)
        self.last_action = action

        # Drags armed before the modal opened still finish in their pane.
        if action.type is ActionType.DRAG and self.handler.drag_region() in _BACKGROUND_DRAGS:
            return self._handle_drag(action)
        if action.type is ActionType.DRAG_END and self.handler.drag_region() in _BACKGROUND_DRAGS:
            return self._handle_drag_end(action)

        if self.modal.is_open:
            region = action.region
            if region is not None and is_background_region(region.id):
                return False
            return self.modal.handle_action(action)

        if action.type is ActionType.NONE:
            if event.kind is EventKind.PRESS and event.button is MouseButton.RIGHT:
                return self._handle_context_press(action)
            return False
        if action.type is ActionType.CLICK:
            return self._handle_click(action)
        if action.type is ActionType.DOUBLE_CLICK:
            return self._handle_double_click(action)
        if action.type.is_scroll:
            return self._handle_scroll(action)
        if action.type is ActionType.DRAG:
            return self._handle_drag(action)
        if action.type is ActionType.DRAG_END:
            return self._handle_drag_end(action)
        return self.files.handle_action(action)

    def _handle_context_press(self, action: MouseAction) -> bool:
        region = action.region
        if region is None or region.id != DashboardRegion.FILE_ROW:
            return False
        self.files.select(int(region.data))
        self.modal.open()
        return True

    def _handle_click(self, action: MouseAction) -> bool:
        region = action.region
        if region is None:
            return True
        if region.id == DashboardRegion.HEADER_CLOSE:
            self.modal.open()
            return True
        if region.id == DashboardRegion.PANE_DIVIDER:
            return self.split.handle_action(action, self.handler)
        if region.id == DashboardRegion.FILE_ROW:
            self.focus = "list"
            if self.files.handle_action(action):
                self.preview_selected()
            return True
        if region.id == DashboardRegion.DETAIL:
            self.focus = "detail"
            pos = self._selection_pos(action.x, action.y)
            if pos is None:
                self.selection.clear()
                return True
            self.selection.prepare_drag(pos[0], pos[1], self._detail_rect)
            self.handler.start_drag(action.x, action.y, DashboardRegion.DETAIL, self.detail_offset)
            return True
        if region.id == DashboardRegion.SCROLLBAR:
            self.detail_offset = offset_for_track_row(self._scrollbar_params(), action.y - self._track_rect.y)
            self.handler.start_drag(action.x, action.y, DashboardRegion.SCROLLBAR, self.detail_offset)
            return True
        if region.id == DashboardRegion.SIDEBAR:
            self.focus = "list"
            return True
        return False

    def _handle_double_click(self, action: MouseAction) -> bool:
        region = action.region
        if region is None:
            return False
        if region.id == DashboardRegion.FILE_ROW:
            return self.files.handle_action(action)
        if region.id == DashboardRegion.DETAIL:
            # Second press of a double-click must not leave a stale anchor.
            self.selection.clear()
            return True
        return self._handle_click(action)

    def _handle_scroll(self, action: MouseAction) -> bool:
        in_sidebar = action.x < self.split.left_width
        if action.type.is_vertical_scroll:
            if in_sidebar:
                return self.files.handle_action(action)
            target = clamp(self.detail_offset + action.delta, 0, self._detail_max_offset())
            if target == self.detail_offset:
                return False
            self.detail_offset = target
            return True
        if in_sidebar:
            return False
        target = max(0, self.detail_text_x + action.delta)
        if target == self.detail_text_x:
            return False
        self.detail_text_x = target
        return True

    def _handle_drag(self, action: MouseAction) -> bool:
        dragged = self.handler.drag_region()
        if dragged == DashboardRegion.PANE_DIVIDER:
            return self.split.handle_action(action, self.handler)
        if dragged == DashboardRegion.DETAIL:
            pos = self._selection_pos(action.x, action.y)
            if pos is None:
                return False
            self.selection.handle_drag(*pos)
            return True
        if dragged == DashboardRegion.SCROLLBAR:
            target = offset_for_track_row(self._scrollbar_params(), action.y - self._track_rect.y)
            if target == self.detail_offset:
                return False
            self.detail_offset = target
            return True
        return False

    def _handle_drag_end(self, action: MouseAction) -> bool:
        dragged = self.handler.drag_region()
        if dragged == DashboardRegion.PANE_DIVIDER:
            return self.split.handle_action(action, self.handler)
        if dragged == DashboardRegion.DETAIL:
            self.selection.finish_drag()
            if self.selection.has_selection:
                count = self.selection.end.line - self.selection.start.line + 1
                self.status = f"selected {count} line{'s' if count != 1 else ''}"
            return True
        return dragged == DashboardRegion.SCROLLBAR

    def selected_text(self) -> str:
        if not self.selection.has_selection:
            return ""
        start = self.selection.start.line
        end = self.selection.end.line
        return "\n".join(self.selection.selected_text(self.preview_lines[start : end + 1], start))

    def handle_key(self, key: str) -> bool:
        if key == "CTRL_C":
            self.should_quit = True
            return True
        if self.modal.is_open:
            return self.modal.handle_key(key)
        if key == "q":
            self.modal.open()
            return True
        if key == "ESC":
            if not self.selection.has_selection:
                return False
            self.selection.clear()
            return True
        if key in {"UP", "DOWN", "k", "j"}:
            moved = self.files.move_cursor(-1 if key in {"UP", "k"} else 1)
            if moved:
                self.preview_selected()
            return moved
        if key in {"ENTER_CR", "ENTER_LF"}:
            return self.files.activate()
        return False


__all__ = ["Dashboard", "DashboardRegion", "list_entries"]
