"""Confirmation modal drawn over the background panes.

While open, the modal registers a full-screen backdrop, its body, and one
region per button after every background region, so the last-wins hit map
routes any click inside the modal to the modal. Clicking the backdrop
cancels.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..ansi import BOLD, REVERSE, RESET, display_width, fit_ansi_line
from ..mouse import ActionType, HitMap, MouseAction, Rect, centered_rect

MODAL_BACKDROP = "modal-backdrop"
MODAL_BODY = "modal-body"
MODAL_BUTTON = "modal-button"
MODAL_REGION_IDS = frozenset({MODAL_BACKDROP, MODAL_BODY, MODAL_BUTTON})

HOVER_STYLE = "\x1b[4m"
_BUTTON_GAP = 2
_MIN_WIDTH = 24


def is_background_region(region_id: str) -> bool:
    """Return whether a region belongs to panes underneath the modal."""
    return region_id not in MODAL_REGION_IDS


@dataclass(frozen=True)
class ModalButton:
    id: str
    label: str

    @property
    def text(self) -> str:
        return f"[ {self.label} ]"


class ConfirmModal:
    def __init__(
        self,
        title: str,
        message: str,
        buttons: Sequence[ModalButton] = (ModalButton("confirm", "Yes"), ModalButton("cancel", "No")),
        *,
        cancel_id: str = "cancel",
        on_choice: Callable[[str], None] | None = None,
    ) -> None:
        self.title = title
        self.message = message
        self.buttons = tuple(buttons)
        self.cancel_id = cancel_id
        self.on_choice = on_choice
        self.is_open = False
        self.focus_index = 0
        self.hover_id: str | None = None
        self.rect = Rect(0, 0, 0, 0)

    def open(self) -> None:
        self.is_open = True
        self.focus_index = 0
        self.hover_id = None

    def close(self) -> None:
        self.is_open = False
        self.hover_id = None

    def _buttons_width(self) -> int:
        return sum(display_width(btn.text) for btn in self.buttons) + _BUTTON_GAP * max(0, len(self.buttons) - 1)

    def layout(self, screen_width: int, screen_height: int) -> Rect:
        inner = max(_MIN_WIDTH, display_width(self.title), display_width(self.message), self._buttons_width())
        # border + title + blank + message + blank + buttons + border
        return centered_rect(screen_width, screen_height, inner + 4, 7)

    def _button_rects(self) -> list[Rect]:
        rect = self.rect
        x = rect.x + 1 + max(0, (rect.width - 2 - self._buttons_width()) // 2)
        y = rect.bottom - 2
        out: list[Rect] = []
        for btn in self.buttons:
            width = display_width(btn.text)
            out.append(Rect.of(x, y, width, 1))
            x += width + _BUTTON_GAP
        return out

    def register(self, hit_map: HitMap, screen_width: int, screen_height: int) -> None:
        if not self.is_open:
            return
        self.rect = self.layout(screen_width, screen_height)
        hit_map.add_rect(MODAL_BACKDROP, 0, 0, screen_width, screen_height)
        hit_map.add(MODAL_BODY, self.rect)
        for btn, btn_rect in zip(self.buttons, self._button_rects()):
            hit_map.add(MODAL_BUTTON, btn_rect, btn.id)

    def choose(self, button_id: str) -> None:
        self.close()
        if self.on_choice is not None:
            self.on_choice(button_id)

    def handle_action(self, action: MouseAction) -> bool:
        """Apply one classified action while open; returns whether anything changed."""
        if not self.is_open:
            return False
        region = action.region
        region_id = region.id if region is not None else None
        if action.type in (ActionType.CLICK, ActionType.DOUBLE_CLICK):
            if region_id == MODAL_BUTTON:
                self.choose(str(region.data))
                return True
            if region_id == MODAL_BACKDROP:
                self.choose(self.cancel_id)
                return True
            return False
        if action.type is ActionType.HOVER:
            hover = str(region.data) if region_id == MODAL_BUTTON else None
            if hover == self.hover_id:
                return False
            self.hover_id = hover
            return True
        return False

    def handle_key(self, key: str) -> bool:
        if not self.is_open:
            return False
        if key in {"LEFT", "RIGHT", "TAB"} and self.buttons:
            step = -1 if key == "LEFT" else 1
            self.focus_index = (self.focus_index + step) % len(self.buttons)
            return True
        if key in {"ENTER_CR", "ENTER_LF"} and self.buttons:
            self.choose(self.buttons[self.focus_index].id)
            return True
        if key == "ESC":
            self.choose(self.cancel_id)
            return True
        return False

    def render_box(self) -> list[str]:
        """Rows of the modal box, ``self.rect.width`` columns each."""
        inner = max(0, self.rect.width - 2)
        buttons: list[str] = []
        for idx, btn in enumerate(self.buttons):
            if idx == self.focus_index:
                buttons.append(f"{REVERSE}{btn.text}{RESET}")
            elif btn.id == self.hover_id:
                buttons.append(f"{HOVER_STYLE}{btn.text}{RESET}")
            else:
                buttons.append(btn.text)
        pad = max(0, (inner - self._buttons_width()) // 2)
        body = [
            " " * max(0, (inner - display_width(self.title)) // 2) + f"{BOLD}{self.title}{RESET}",
            "",
            " " + self.message,
            "",
            " " * pad + (" " * _BUTTON_GAP).join(buttons),
        ]
        rows = ["┌" + "─" * inner + "┐"]
        rows.extend("│" + fit_ansi_line(line, inner) + "│" for line in body)
        rows.append("└" + "─" * inner + "┘")
        return rows


__all__ = [
    "ConfirmModal",
    "MODAL_BACKDROP",
    "MODAL_BODY",
    "MODAL_BUTTON",
    "ModalButton",
    "is_background_region",
]
